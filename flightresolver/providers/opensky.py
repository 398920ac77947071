"""
OpenSky Network live-position provider.

OpenSky has no per-flight lookup: /states/all returns every aircraft it
currently sees, and matching against the requested flight is done client
side on the callsign. It also carries no route or timetable data, so route
endpoints are filled from the enrichment tables and timestamps are
placeholders around the current time.

OpenSky state vectors are 17-element arrays. Matching and record building
only need:
0: icao24          - ICAO24 hex address
1: callsign        - Callsign (8 chars max)
2: origin_country  - Country of registration
8: on_ground       - Boolean
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from flightresolver.config import config
from flightresolver.enrichment.airlines import airline_from_callsign, to_icao
from flightresolver.enrichment.routes import plausible_route
from flightresolver.models import (
    ErrorKind,
    FlightEndpoint,
    FlightStatus,
    Found,
    NormalizedFlightRecord,
    NotFound,
    ProviderError,
    ProviderResult,
    SourceTag,
)
from flightresolver.providers.base import call_timeout, utc_now
from flightresolver.providers.variants import split_flight_code

logger = logging.getLogger(__name__)

# Placeholder window around "now" for a route with no timestamps
PLACEHOLDER_HALF_WINDOW = timedelta(hours=2)


@dataclass
class StateVector:
    """
    Parsed state vector from OpenSky API.

    Keeps the fields used for callsign matching and route estimation;
    position and kinematics are not part of a flight record.
    """
    icao24: str
    callsign: Optional[str]
    origin_country: Optional[str]
    on_ground: bool

    @classmethod
    def from_array(cls, arr: List[Any]) -> Optional['StateVector']:
        """
        Parse OpenSky state vector array into StateVector object.

        Returns None if the array is malformed or missing required fields.
        """
        if not isinstance(arr, list) or len(arr) < 17:
            return None

        icao24 = arr[0]
        if not icao24 or not isinstance(icao24, str):
            return None

        # Normalize callsign (strip whitespace, handle None)
        callsign = arr[1]
        if isinstance(callsign, str):
            callsign = callsign.strip() or None
        else:
            callsign = None

        origin_country = arr[2] if isinstance(arr[2], str) else None

        return cls(
            icao24=icao24.lower(),
            callsign=callsign,
            origin_country=origin_country,
            on_ground=bool(arr[8]),
        )


class OpenSkyClient:
    """
    Client for OpenSky Network API.

    Handles:
    - GET requests to /states/all endpoint
    - Optional authentication for higher rate limits

    Holds only immutable settings; every call issues its own request.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        base_url: str = 'https://opensky-network.org/api',
    ):
        self.base_url = base_url.rstrip('/')
        self.auth = None
        if username and password:
            self.auth = HTTPBasicAuth(username, password)
            logger.info('OpenSky client initialized with authentication')
        else:
            logger.info('OpenSky client running without authentication (lower rate limits)')

    def get_states(self, timeout: float) -> List[StateVector]:
        """
        Fetch all current state vectors from OpenSky.

        Raises:
            requests.RequestException on network/API errors
            ValueError on a response that is not JSON or not shaped like a states payload
        """
        url = f'{self.base_url}/states/all'
        logger.debug(f'Fetching states: {url}')

        try:
            response = requests.get(url, auth=self.auth, timeout=timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            logger.error('OpenSky API timeout')
            raise
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 429:
                logger.warning('OpenSky rate limit exceeded')
            else:
                logger.error(f'OpenSky API error: {e}')
            raise

        if not isinstance(data, dict):
            raise ValueError('OpenSky response is not a JSON object')

        states_raw = data.get('states') or []
        if not isinstance(states_raw, list):
            raise ValueError('OpenSky states is not a list')
        logger.info(f'Received {len(states_raw)} state vectors from OpenSky')

        states = []
        for arr in states_raw:
            sv = StateVector.from_array(arr)
            if sv:
                states.append(sv)
        return states


def _alphanumeric(value: str) -> str:
    return re.sub(r'[^A-Z0-9]', '', value.upper())


def callsign_search_terms(identifier: str) -> List[str]:
    """
    Substrings to look for in callsigns, most specific first.

    - full identifier
    - ICAO form of the identifier (callsigns use ICAO designators)
    - carrier code only
    - identifier stripped to letters and digits
    """
    full = identifier.strip().upper()
    terms = [full]

    parts = split_flight_code(identifier)
    if parts:
        designator, number = parts
        icao = designator if len(designator) == 3 else to_icao(designator)
        if icao:
            terms.append(f'{icao}{number}')
        terms.append(designator)
    else:
        terms.append(full[:3])

    terms.append(_alphanumeric(full))

    unique = []
    for term in terms:
        if term and term not in unique:
            unique.append(term)
    return unique


def match_state(states: List[StateVector], identifier: str) -> Optional[StateVector]:
    """
    Find the state vector for a flight identifier.

    Callsign-contains matching over callsign_search_terms, then a looser
    fallback on the two-letter carrier prefix which may return a different
    flight of the same carrier.
    """
    for term in callsign_search_terms(identifier):
        for state in states:
            if state.callsign and term in state.callsign.upper():
                return state

    carrier = identifier.strip().upper()[:2]
    if carrier:
        for state in states:
            if state.callsign and state.callsign.upper().startswith(carrier):
                logger.info(f'Carrier-level OpenSky match {state.callsign} used for {identifier}')
                return state

    return None


class OpenSkyProvider:
    """
    Live-position provider backed by OpenSky.

    Produces records with synthesized route endpoints, status from the
    ground-state flag, live=True and source=opensky-live.
    """

    name = 'opensky'

    def __init__(
        self,
        client: Optional[OpenSkyClient] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client or OpenSkyClient()
        self.timeout = timeout or 5.0
        self.clock = clock

    @classmethod
    def from_config(cls) -> 'OpenSkyProvider':
        """Create provider from application configuration."""
        client = OpenSkyClient(
            username=config.opensky.username,
            password=config.opensky.password,
            base_url=config.opensky.base_url,
        )
        return cls(client=client, timeout=config.opensky.timeout_seconds)

    def resolve(self, identifier: str, deadline: Optional[float] = None) -> ProviderResult:
        timeout = call_timeout(self.timeout, deadline)
        if timeout is None:
            logger.warning(f'OpenSky search for {identifier} abandoned: deadline exceeded')
            return ProviderError(self.name, ErrorKind.TIMEOUT, 'deadline exceeded')

        try:
            states = self.client.get_states(timeout=timeout)
        except requests.exceptions.Timeout:
            return ProviderError(self.name, ErrorKind.TIMEOUT)
        except requests.exceptions.HTTPError as e:
            return ProviderError(self.name, ErrorKind.HTTP, str(e))
        except ValueError as e:
            logger.warning(f'OpenSky returned malformed data: {e}')
            return ProviderError(self.name, ErrorKind.MALFORMED, str(e))
        except requests.exceptions.RequestException as e:
            logger.warning(f'OpenSky request failed: {e}')
            return ProviderError(self.name, ErrorKind.NETWORK, str(e))

        state = match_state(states, identifier)
        if state is None:
            logger.debug(f'No active flight found for {identifier} in OpenSky')
            return NotFound(self.name)

        logger.info(f'Found active flight {state.callsign} in OpenSky for {identifier}')
        return Found(self._to_record(state))

    def _to_record(self, state: StateVector) -> NormalizedFlightRecord:
        airline = airline_from_callsign(state.callsign)
        route = plausible_route(airline, state.origin_country)
        now = self.clock()
        departed_at = now - PLACEHOLDER_HALF_WINDOW
        arriving_at = now + PLACEHOLDER_HALF_WINDOW

        logger.debug(
            f'Estimated route for {state.callsign}: {route.departure.iata} -> {route.arrival.iata} '
            f'(airline {airline}, origin {state.origin_country})'
        )

        return NormalizedFlightRecord(
            flight_number=state.callsign,
            airline=airline,
            aircraft=state.icao24,
            status=FlightStatus.LANDED if state.on_ground else FlightStatus.IN_FLIGHT,
            departure=FlightEndpoint(
                airport=route.departure.airport,
                iata_code=route.departure.iata,
                scheduled_time=departed_at,
                actual_time=departed_at,
                delay_minutes=0,
            ),
            arrival=FlightEndpoint(
                airport=route.arrival.airport,
                iata_code=route.arrival.iata,
                scheduled_time=arriving_at,
                delay_minutes=0,
            ),
            live=True,
            source=SourceTag.OPENSKY,
        )
