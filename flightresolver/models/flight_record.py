"""
NormalizedFlightRecord - the common shape every provider is adapted into.

Design notes:
- departure/arrival are always present as FlightEndpoint objects, even when
  every field inside them is None, so callers never null-check the outer shape
- status is restricted to FlightStatus; source to the SourceTag vocabulary
- delay_minutes is clamped to >= 0 on construction
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class FlightStatus(str, Enum):
    """
    Flight phase as reported to callers.

    - SCHEDULED: not yet departed
    - IN_FLIGHT: departed, not yet arrived
    - LANDED: arrived (or presumed arrived)
    """
    SCHEDULED = 'scheduled'
    IN_FLIGHT = 'in-flight'
    LANDED = 'landed'


class SourceTag(str, Enum):
    """Provenance of a record."""
    AVIATIONSTACK = 'aviationstack'
    OPENSKY = 'opensky-live'
    HYBRID = 'aviationstack-opensky-hybrid'
    SYNTHETIC_KNOWN = 'mock-accurate'
    SYNTHETIC_RANDOM = 'mock'

    @property
    def is_synthetic(self) -> bool:
        return self in (SourceTag.SYNTHETIC_KNOWN, SourceTag.SYNTHETIC_RANDOM)


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class FlightEndpoint:
    """One end of a flight (departure or arrival)."""
    airport: Optional[str] = None
    iata_code: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    actual_time: Optional[datetime] = None
    terminal: Optional[str] = None
    gate: Optional[str] = None
    delay_minutes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.delay_minutes is not None:
            self.delay_minutes = max(0, int(self.delay_minutes))

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'iata_code': self.iata_code,
            'scheduled_time': _isoformat(self.scheduled_time),
            'actual_time': _isoformat(self.actual_time),
            'terminal': self.terminal,
            'gate': self.gate,
            'delay_minutes': self.delay_minutes,
        }


@dataclass
class NormalizedFlightRecord:
    """
    Normalized flight record returned by the resolver.

    If live is True, status came from the live-position provider.
    """
    flight_number: str
    status: FlightStatus
    source: SourceTag
    airline: Optional[str] = None
    aircraft: Optional[str] = None
    departure: FlightEndpoint = field(default_factory=FlightEndpoint)
    arrival: FlightEndpoint = field(default_factory=FlightEndpoint)
    live: bool = False

    def __post_init__(self) -> None:
        self.status = FlightStatus(self.status)
        self.source = SourceTag(self.source)
        if self.departure is None:
            self.departure = FlightEndpoint()
        if self.arrival is None:
            self.arrival = FlightEndpoint()

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'flight_number': self.flight_number,
            'airline': self.airline,
            'aircraft': self.aircraft,
            'status': self.status.value,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
            'live': self.live,
            'source': self.source.value,
        }

    def status_summary(self) -> dict:
        """
        Status-only projection.

        Drops airline/aircraft; keeps both endpoints so boards can show
        delays, gates and terminals alongside the phase.
        """
        return {
            'flight_number': self.flight_number,
            'status': self.status.value,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
            'live': self.live,
            'source': self.source.value,
        }
