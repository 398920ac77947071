"""
Data models for the flight resolver.

Plain dataclasses; nothing here touches the network or a database.
"""

from flightresolver.models.flight_record import (
    FlightEndpoint,
    FlightStatus,
    NormalizedFlightRecord,
    SourceTag,
)
from flightresolver.models.results import (
    ErrorKind,
    Found,
    NotFound,
    ProviderError,
    ProviderResult,
)

__all__ = [
    'FlightEndpoint',
    'FlightStatus',
    'NormalizedFlightRecord',
    'SourceTag',
    'ErrorKind',
    'Found',
    'NotFound',
    'ProviderError',
    'ProviderResult',
]
