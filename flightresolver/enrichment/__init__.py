"""
Static enrichment tables: airlines, airports and plausible routes.

Built once at import and exposed as read-only mappings; safe for any
number of concurrent readers.
"""

from flightresolver.enrichment.airlines import (
    AIRLINE_NAMES,
    UNKNOWN_AIRLINE,
    airline_from_callsign,
    airline_name,
    to_iata,
    to_icao,
)
from flightresolver.enrichment.airports import AIRPORTS, AirportEntry, airport_name, get_airport
from flightresolver.enrichment.routes import DEFAULT_ROUTE, RouteDefault, plausible_route

__all__ = [
    'AIRLINE_NAMES',
    'UNKNOWN_AIRLINE',
    'airline_from_callsign',
    'airline_name',
    'to_iata',
    'to_icao',
    'AIRPORTS',
    'AirportEntry',
    'airport_name',
    'get_airport',
    'DEFAULT_ROUTE',
    'RouteDefault',
    'plausible_route',
]
