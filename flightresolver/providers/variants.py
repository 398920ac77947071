"""
Identifier variants for schedule lookups.

Users type flight codes in many shapes: 'QF104', 'qf 104', 'QFA104',
'QF0104'. Providers index them by IATA code, ICAO code, or airline plus
number. IdentifierVariants turns one raw identifier into the finite,
ordered list of queries worth trying; iterating it again restarts from
the first variant.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from flightresolver.enrichment.airlines import to_iata, to_icao

# Two-character IATA designator (may contain a digit, e.g. '6E') or
# three-letter ICAO designator, then the flight number with optional suffix
_FLIGHT_CODE_RE = re.compile(r'^([A-Z0-9]{2}[A-Z]?)(\d{1,5}[A-Z]?)$')
_SEPARATORS_RE = re.compile(r'[\s\-_/.]+')


@dataclass(frozen=True)
class QueryAttempt:
    """
    One identifier variant expressed as provider query parameters.

    kind names the normalisation that produced it, for logging.
    """
    kind: str
    params: Tuple[Tuple[str, str], ...]

    def as_params(self) -> dict:
        return dict(self.params)


def clean_identifier(identifier: str) -> str:
    """Upper-case and drop separators: 'qf 104' -> 'QF104'."""
    return _SEPARATORS_RE.sub('', identifier.strip().upper())


def split_flight_code(identifier: str) -> Optional[Tuple[str, str]]:
    """
    Split a flight code at the letter/number boundary.

    Returns (airline designator, flight number) with leading zeros removed
    from the number, or None if the identifier does not look like a flight code.

    Examples:
    - QF104   -> ('QF', '104')
    - QFA0104 -> ('QFA', '104')
    - 6E2025  -> ('6E', '2025')
    """
    match = _FLIGHT_CODE_RE.match(clean_identifier(identifier))
    if not match:
        return None
    designator, number = match.groups()
    number = number.lstrip('0') or '0'
    if designator.isdigit() or (len(designator) == 3 and not designator.isalpha()):
        return None
    return designator, number


def _designator_param(designator: str) -> str:
    return 'airline_icao' if len(designator) == 3 else 'airline_iata'


class IdentifierVariants:
    """
    Ordered, de-duplicated query variants for one identifier.

    Order:
    1. exact code as typed (cleaned)
    2. ICAO-normalised code (QF104 -> QFA104)
    3. IATA-normalised code (QFA104 -> QF104)
    4. airline designator + flight number, split at the letter/number boundary
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        self.cleaned = clean_identifier(identifier)
        self.parts = split_flight_code(identifier)

    def __iter__(self) -> Iterator[QueryAttempt]:
        seen = set()
        for attempt in self._candidates():
            if attempt.params in seen:
                continue
            seen.add(attempt.params)
            yield attempt

    def _candidates(self) -> Iterator[QueryAttempt]:
        if not self.cleaned:
            return

        if self.parts is None:
            yield QueryAttempt('exact', (('flight_iata', self.cleaned),))
            return

        designator, number = self.parts
        exact_key = 'flight_icao' if len(designator) == 3 else 'flight_iata'
        yield QueryAttempt('exact', ((exact_key, self.cleaned),))

        icao = designator if len(designator) == 3 else to_icao(designator)
        if icao:
            yield QueryAttempt('icao', (('flight_icao', f'{icao}{number}'),))

        iata = designator if len(designator) == 2 else to_iata(designator)
        if iata:
            yield QueryAttempt('iata', (('flight_iata', f'{iata}{number}'),))

        yield QueryAttempt('split', (
            (_designator_param(designator), designator),
            ('flight_number', number),
        ))
