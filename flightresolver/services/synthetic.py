"""
Synthetic flight records - the guaranteed last resort.

When every provider misses or fails, the resolver still has to hand back
a well-formed record. Two flavours:
- known identifiers get a fixed, accurate route (source=mock-accurate)
- anything else gets a random but plausible domestic flight (source=mock)

Synthetic records are always live=False and carry a synthetic source tag
so downstream consumers can tell them apart from provider data.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from flightresolver.models import FlightEndpoint, FlightStatus, NormalizedFlightRecord, SourceTag
from flightresolver.providers.base import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnownRoute:
    """Fixed route data for a known identifier."""
    airline: str
    aircraft: str
    departure_airport: str
    departure_iata: str
    departure_terminal: str
    departure_gate: str
    arrival_airport: str
    arrival_iata: str
    arrival_terminal: str
    arrival_gate: str
    duration: timedelta


_QANTAS_HNL_SYD = KnownRoute(
    airline='Qantas Airways',
    aircraft='Boeing 787-9',
    departure_airport='Honolulu International Airport',
    departure_iata='HNL',
    departure_terminal='2',
    departure_gate='15',
    arrival_airport='Sydney Kingsford Smith Airport',
    arrival_iata='SYD',
    arrival_terminal='1',
    arrival_gate='8',
    duration=timedelta(hours=10, minutes=30),
)

KNOWN_ROUTES: Dict[str, KnownRoute] = {
    'QFA104': _QANTAS_HNL_SYD,
    'QF104': _QANTAS_HNL_SYD,
}

# Known flights depart this long after the request
KNOWN_DEPARTURE_LEAD = timedelta(hours=2)

RANDOM_AIRLINES = ('Air India', 'IndiGo', 'SpiceJet', 'Vistara', 'GoAir')
RANDOM_AIRPORTS = (
    ('Mumbai Airport', 'BOM'),
    ('Delhi Airport', 'DEL'),
    ('Bangalore Airport', 'BLR'),
    ('Chennai Airport', 'MAA'),
    ('Kolkata Airport', 'CCU'),
)
RANDOM_AIRCRAFT = 'A320'
DELAY_PROBABILITY = 0.3
MAX_DELAY_MINUTES = 30


class SyntheticFlightGenerator:
    """
    Builds synthetic records.

    rng and clock are injectable so tests can pin the random flavour.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.rng = rng or random.Random()
        self.clock = clock or utc_now

    def generate(self, identifier: str) -> NormalizedFlightRecord:
        known = KNOWN_ROUTES.get(identifier.strip().upper())
        if known:
            logger.info(f'Using known synthetic route for {identifier}')
            return self._known(identifier, known)

        logger.info(f'Using random synthetic data for {identifier}')
        return self._random(identifier)

    def _known(self, identifier: str, route: KnownRoute) -> NormalizedFlightRecord:
        departure_time = self.clock() + KNOWN_DEPARTURE_LEAD
        arrival_time = departure_time + route.duration

        return NormalizedFlightRecord(
            flight_number=identifier,
            airline=route.airline,
            aircraft=route.aircraft,
            status=FlightStatus.SCHEDULED,
            departure=FlightEndpoint(
                airport=route.departure_airport,
                iata_code=route.departure_iata,
                scheduled_time=departure_time,
                terminal=route.departure_terminal,
                gate=route.departure_gate,
                delay_minutes=0,
            ),
            arrival=FlightEndpoint(
                airport=route.arrival_airport,
                iata_code=route.arrival_iata,
                scheduled_time=arrival_time,
                terminal=route.arrival_terminal,
                gate=route.arrival_gate,
                delay_minutes=0,
            ),
            live=False,
            source=SourceTag.SYNTHETIC_KNOWN,
        )

    def _random(self, identifier: str) -> NormalizedFlightRecord:
        rng = self.rng
        departure_time = self.clock() + timedelta(hours=rng.uniform(0, 2))
        arrival_time = departure_time + timedelta(hours=rng.uniform(2, 5))
        (dep_name, dep_iata), (arr_name, arr_iata) = rng.sample(RANDOM_AIRPORTS, 2)

        return NormalizedFlightRecord(
            flight_number=identifier,
            airline=rng.choice(RANDOM_AIRLINES),
            aircraft=RANDOM_AIRCRAFT,
            status=FlightStatus.SCHEDULED,
            departure=self._random_endpoint(dep_name, dep_iata, departure_time),
            arrival=self._random_endpoint(arr_name, arr_iata, arrival_time),
            live=False,
            source=SourceTag.SYNTHETIC_RANDOM,
        )

    def _random_endpoint(self, airport: str, iata: str, scheduled: datetime) -> FlightEndpoint:
        rng = self.rng
        delayed = rng.random() < DELAY_PROBABILITY
        return FlightEndpoint(
            airport=airport,
            iata_code=iata,
            scheduled_time=scheduled,
            terminal=str(rng.randint(1, 3)),
            gate=str(rng.randint(1, 20)),
            delay_minutes=rng.randint(1, MAX_DELAY_MINUTES) if delayed else 0,
        )
