"""
Flight data provider adapters.

Each adapter answers resolve(identifier) with Found, NotFound or
ProviderError and never raises on ordinary misses or network trouble.
"""

from flightresolver.providers.base import FlightProvider
from flightresolver.providers.aviationstack import AviationStackProvider
from flightresolver.providers.opensky import OpenSkyClient, OpenSkyProvider, StateVector
from flightresolver.providers.variants import IdentifierVariants, QueryAttempt

__all__ = [
    'FlightProvider',
    'AviationStackProvider',
    'OpenSkyClient',
    'OpenSkyProvider',
    'StateVector',
    'IdentifierVariants',
    'QueryAttempt',
]
