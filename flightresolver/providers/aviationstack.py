"""
AviationStack schedule provider.

Looks up flights on the /flights endpoint, which carries route and
timetable data (airports, terminals, gates, scheduled and actual times)
but no reliable live status. Status is inferred from the timestamps.

Search strategy:
- Identifier variants in order (exact, ICAO, IATA, airline + number)
- For each variant, currently active flights first, then any flight
- First request returning at least one flight wins
- A failed request (timeout, HTTP error, bad JSON, API error body) is
  logged and the next request is tried
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Union

import requests

from flightresolver.config import config
from flightresolver.enrichment.airports import airport_name
from flightresolver.models import (
    ErrorKind,
    FlightEndpoint,
    Found,
    NormalizedFlightRecord,
    NotFound,
    ProviderError,
    ProviderResult,
    SourceTag,
)
from flightresolver.providers.base import call_timeout, utc_now
from flightresolver.providers.variants import IdentifierVariants, QueryAttempt, clean_identifier
from flightresolver.services.status import infer_status

logger = logging.getLogger(__name__)


def parse_datetime(dt_str: Optional[str]) -> Optional[datetime]:
    """Parse ISO datetime string from API; naive values are taken as UTC."""
    if not dt_str or not isinstance(dt_str, str):
        return None
    try:
        parsed = datetime.fromisoformat(dt_str.replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def calculate_delay(scheduled: Optional[datetime], actual: Optional[datetime]) -> Optional[int]:
    """Whole minutes actual is behind scheduled, never negative. None if either is missing."""
    if scheduled is None or actual is None:
        return None
    return max(0, int((actual - scheduled).total_seconds() // 60))


def _parse_delay(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _section(container: dict, key: str) -> dict:
    """Nested object from a flight entry; missing is empty, anything else is malformed."""
    value = container.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f'{key} is not an object')
    return value


class AviationStackProvider:
    """
    Schedule-capable provider backed by AviationStack.

    Produces records with full route/schedule fields, live=False and
    source=aviationstack.
    """

    name = 'aviationstack'

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.api_key = api_key
        self.base_url = (base_url or 'http://api.aviationstack.com/v1').rstrip('/')
        self.timeout = timeout or 10.0
        self.clock = clock

        if not self.api_key:
            logger.warning('AviationStack API key not configured - schedule lookups disabled')

    @classmethod
    def from_config(cls) -> 'AviationStackProvider':
        """Create provider from application configuration."""
        return cls(
            api_key=config.aviationstack.api_key if config.aviationstack.is_configured else None,
            base_url=config.aviationstack.base_url,
            timeout=config.aviationstack.timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def resolve(self, identifier: str, deadline: Optional[float] = None) -> ProviderResult:
        """Try every identifier variant until one yields a flight."""
        last_error: Optional[ProviderError] = None

        for attempt in IdentifierVariants(identifier):
            for params in self._request_params(attempt):
                timeout = call_timeout(self.timeout, deadline)
                if timeout is None:
                    logger.warning(f'AviationStack search for {identifier} abandoned: deadline exceeded')
                    return ProviderError(self.name, ErrorKind.TIMEOUT, 'deadline exceeded')

                outcome = self._fetch(params, timeout)
                if isinstance(outcome, ProviderError):
                    last_error = outcome
                    continue

                if outcome:
                    flight = outcome[0]
                    if not isinstance(flight, dict):
                        last_error = ProviderError(self.name, ErrorKind.MALFORMED, 'flight entry is not an object')
                        continue
                    try:
                        record = self._to_record(flight, identifier)
                    except ValueError as e:
                        logger.warning(f'Malformed AviationStack flight for {params}: {e}')
                        last_error = ProviderError(self.name, ErrorKind.MALFORMED, str(e))
                        continue
                    logger.info(
                        f'Found {record.flight_number} in AviationStack via {attempt.kind} variant '
                        f'({record.departure.iata_code} -> {record.arrival.iata_code}, {record.status.value})'
                    )
                    return Found(record)

        if last_error is not None:
            logger.warning(f'No AviationStack match for {identifier}; last error: {last_error.kind.value}')
            return last_error

        logger.debug(f'No flight found in AviationStack for {identifier}')
        return NotFound(self.name)

    def _request_params(self, attempt: QueryAttempt) -> List[dict]:
        """Active flights only, then unfiltered."""
        base = attempt.as_params()
        return [
            {**base, 'flight_status': 'active'},
            base,
        ]

    def _fetch(self, search_params: dict, timeout: float) -> Union[List[Any], ProviderError]:
        """Run one /flights request. Returns the data list or a ProviderError."""
        params = {
            'access_key': self.api_key,
            **search_params,
            'limit': 1,
        }

        logger.debug(f'Trying AviationStack search: {search_params}')

        try:
            response = requests.get(
                f'{self.base_url}/flights',
                params=params,
                timeout=timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            logger.warning(f'AviationStack timeout for {search_params}')
            return ProviderError(self.name, ErrorKind.TIMEOUT)
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.warning(f'AviationStack API error: {status_code} for {search_params}')
            return ProviderError(self.name, ErrorKind.HTTP, f'status {status_code}')
        except ValueError as e:
            logger.warning(f'AviationStack returned invalid JSON for {search_params}: {e}')
            return ProviderError(self.name, ErrorKind.MALFORMED, str(e))
        except requests.exceptions.RequestException as e:
            logger.warning(f'AviationStack request failed for {search_params}: {e}')
            return ProviderError(self.name, ErrorKind.NETWORK, str(e))

        if not isinstance(data, dict):
            logger.warning('AviationStack response is not a JSON object')
            return ProviderError(self.name, ErrorKind.MALFORMED, 'response is not an object')

        if 'error' in data:
            logger.warning(f'AviationStack API error: {data["error"]}')
            return ProviderError(self.name, ErrorKind.API, str(data['error']))

        flights = data.get('data') or []
        if not isinstance(flights, list):
            logger.warning('AviationStack response data is not a list')
            return ProviderError(self.name, ErrorKind.MALFORMED, 'data is not a list')

        return flights

    def _to_record(self, flight: dict, identifier: str) -> NormalizedFlightRecord:
        """
        Map an AviationStack flight object onto the normalized record.

        Raises ValueError when a nested section is present but not an object.
        """
        flight_info = _section(flight, 'flight')
        airline = _section(flight, 'airline')
        aircraft = _section(flight, 'aircraft')

        departure = self._endpoint(_section(flight, 'departure'))
        arrival = self._endpoint(_section(flight, 'arrival'))

        status = infer_status(
            scheduled_departure=departure.scheduled_time,
            actual_departure=departure.actual_time,
            scheduled_arrival=arrival.scheduled_time,
            actual_arrival=arrival.actual_time,
            now=self.clock(),
        )

        return NormalizedFlightRecord(
            flight_number=(
                _optional_str(flight_info.get('iata'))
                or _optional_str(flight_info.get('icao'))
                or clean_identifier(identifier)
            ),
            airline=_optional_str(airline.get('name')),
            aircraft=_optional_str(aircraft.get('iata')),
            status=status,
            departure=departure,
            arrival=arrival,
            live=False,
            source=SourceTag.AVIATIONSTACK,
        )

    def _endpoint(self, raw: dict) -> FlightEndpoint:
        iata = _optional_str(raw.get('iata'))
        scheduled = parse_datetime(raw.get('scheduled'))
        actual = parse_datetime(raw.get('actual'))

        delay = _parse_delay(raw.get('delay'))
        if delay is None:
            delay = calculate_delay(scheduled, actual)

        return FlightEndpoint(
            airport=_optional_str(raw.get('airport')) or (airport_name(iata) if iata else None),
            iata_code=iata,
            scheduled_time=scheduled,
            actual_time=actual,
            terminal=_optional_str(raw.get('terminal')),
            gate=_optional_str(raw.get('gate')),
            delay_minutes=delay,
        )
