"""
Tagged outcome of a single provider resolution.

Every provider call ends in exactly one of:
- Found(record)        a matching flight was returned
- NotFound(provider)   provider answered, nothing matched
- ProviderError(...)   timeout, network, HTTP, malformed or API-level failure
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from flightresolver.models.flight_record import NormalizedFlightRecord


class ErrorKind(str, Enum):
    """Classification of transient provider failures."""
    TIMEOUT = 'timeout'
    NETWORK = 'network'
    HTTP = 'http'
    MALFORMED = 'malformed'
    API = 'api'


@dataclass(frozen=True)
class Found:
    record: NormalizedFlightRecord


@dataclass(frozen=True)
class NotFound:
    provider: str


@dataclass(frozen=True)
class ProviderError:
    provider: str
    kind: ErrorKind
    detail: Optional[str] = None


ProviderResult = Union[Found, NotFound, ProviderError]
