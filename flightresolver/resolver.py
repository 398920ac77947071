"""
Flight resolution orchestrator.

Sequences the providers and always returns a record:

    schedule provider ──found──> live provider ──found──> hybrid record
          │                            └──miss/error──> schedule record
          └──miss/error/not configured──> live provider ──found──> live record
                                                └──miss/error──> synthetic record

Misses and transient provider failures are logged and never reach the
caller. The only exception resolve_flight raises is ValueError for an
empty identifier.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from flightresolver.enrichment.airports import UNKNOWN, get_airport
from flightresolver.models import (
    ErrorKind,
    Found,
    NormalizedFlightRecord,
    NotFound,
    ProviderError,
    ProviderResult,
    SourceTag,
)
from flightresolver.providers import AviationStackProvider, FlightProvider, OpenSkyProvider
from flightresolver.services.synthetic import SyntheticFlightGenerator

logger = logging.getLogger(__name__)

# Fields the live provider is trusted with; everything else (route,
# schedule, terminals, gates, delays) stays as the schedule provider reported it
LIVE_OVERRIDE_FIELDS = ('status', 'live')


@dataclass(frozen=True)
class AirportInfo:
    """Airport lookup result."""
    code: str
    name: str
    city: str
    country: str

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'name': self.name,
            'city': self.city,
            'country': self.country,
        }


def merge_live_status(
    schedule: NormalizedFlightRecord,
    live: NormalizedFlightRecord,
) -> NormalizedFlightRecord:
    """
    Combine schedule route data with live status.

    Only LIVE_OVERRIDE_FIELDS are taken from the live record; source
    becomes the hybrid tag.
    """
    overrides = {name: getattr(live, name) for name in LIVE_OVERRIDE_FIELDS}
    return replace(
        schedule,
        departure=replace(schedule.departure),
        arrival=replace(schedule.arrival),
        source=SourceTag.HYBRID,
        **overrides,
    )


def lookup_airport(code: str) -> AirportInfo:
    """Airport details from the enrichment table, or a placeholder on a miss."""
    if not isinstance(code, str) or not code.strip():
        raise ValueError('Airport code is required')

    code = code.strip().upper()
    entry = get_airport(code)
    if entry:
        return AirportInfo(code=code, name=entry.name, city=entry.city, country=entry.country)
    return AirportInfo(code=code, name=f'{code} Airport', city=UNKNOWN, country=UNKNOWN)


class FlightResolver:
    """
    Resolves flight identifiers into normalized records.

    Holds no per-request state; one instance can serve concurrent
    resolutions.
    """

    def __init__(
        self,
        schedule_provider: Optional[FlightProvider] = None,
        live_provider: Optional[FlightProvider] = None,
        synthetic: Optional[SyntheticFlightGenerator] = None,
    ):
        self.schedule_provider = schedule_provider
        self.live_provider = live_provider
        self.synthetic = synthetic or SyntheticFlightGenerator()

    @classmethod
    def from_config(cls) -> 'FlightResolver':
        """Create resolver with providers built from application configuration."""
        schedule = AviationStackProvider.from_config()
        return cls(
            schedule_provider=schedule if schedule.is_configured else None,
            live_provider=OpenSkyProvider.from_config(),
        )

    def resolve_flight(self, identifier: str, deadline: Optional[float] = None) -> NormalizedFlightRecord:
        """
        Best available record for a flight identifier.

        deadline is an absolute time.monotonic() value propagated into
        every provider call.
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise ValueError('Flight identifier is required')
        identifier = identifier.strip()

        if self.schedule_provider is not None:
            scheduled = self._attempt(self.schedule_provider, identifier, deadline)
            if isinstance(scheduled, Found):
                if self.live_provider is None:
                    return scheduled.record

                live = self._attempt(self.live_provider, identifier, deadline)
                if isinstance(live, Found):
                    logger.info(f'Merged live status into schedule record for {identifier}')
                    return merge_live_status(scheduled.record, live.record)
                return scheduled.record

        if self.live_provider is not None:
            live = self._attempt(self.live_provider, identifier, deadline)
            if isinstance(live, Found):
                return live.record

        logger.info(f'All providers exhausted for {identifier}; synthesizing record')
        return self.synthetic.generate(identifier)

    def search_flights(self, query: str, deadline: Optional[float] = None) -> List[NormalizedFlightRecord]:
        """Search by flight number. Always returns exactly one record."""
        return [self.resolve_flight(query, deadline=deadline)]

    def resolve_airport(self, code: str) -> AirportInfo:
        return lookup_airport(code)

    def _attempt(
        self,
        provider: FlightProvider,
        identifier: str,
        deadline: Optional[float],
    ) -> ProviderResult:
        """Run one provider, turning anything unexpected into a ProviderError."""
        name = getattr(provider, 'name', type(provider).__name__)
        try:
            result = provider.resolve(identifier, deadline=deadline)
        except Exception as e:
            logger.exception(f'Provider {name} failed unexpectedly for {identifier}')
            return ProviderError(name, ErrorKind.MALFORMED, str(e))

        if isinstance(result, ProviderError):
            logger.warning(f'Provider {name} error for {identifier}: {result.kind.value} {result.detail or ""}')
        elif isinstance(result, NotFound):
            logger.debug(f'Provider {name} has no match for {identifier}')
        return result
