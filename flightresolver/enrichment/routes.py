"""
Plausible route defaults.

The live-position provider reports where an aircraft is, not where it is
going. These tables supply a believable departure/arrival pair, first by
airline and then by the aircraft's country of registration.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class RouteAirport:
    airport: str
    iata: str


@dataclass(frozen=True)
class RouteDefault:
    departure: RouteAirport
    arrival: RouteAirport


def _route(dep_name: str, dep_iata: str, arr_name: str, arr_iata: str) -> RouteDefault:
    return RouteDefault(RouteAirport(dep_name, dep_iata), RouteAirport(arr_name, arr_iata))


AIRLINE_ROUTES: Mapping[str, RouteDefault] = MappingProxyType({
    'Air India': _route(
        'Indira Gandhi International Airport', 'DEL',
        'Chhatrapati Shivaji International Airport', 'BOM',
    ),
    'Lufthansa': _route(
        'Frankfurt International Airport', 'FRA',
        'Munich Airport', 'MUC',
    ),
    'British Airways': _route(
        'London Heathrow Airport', 'LHR',
        'London Gatwick Airport', 'LGW',
    ),
    'American Airlines': _route(
        'Dallas/Fort Worth International Airport', 'DFW',
        'Los Angeles International Airport', 'LAX',
    ),
    'Delta Air Lines': _route(
        'Hartsfield-Jackson Atlanta International Airport', 'ATL',
        'John F. Kennedy International Airport', 'JFK',
    ),
})

COUNTRY_ROUTES: Mapping[str, RouteDefault] = MappingProxyType({
    'India': _route(
        'Indira Gandhi International Airport', 'DEL',
        'Chhatrapati Shivaji International Airport', 'BOM',
    ),
    'Germany': _route(
        'Frankfurt International Airport', 'FRA',
        'Munich Airport', 'MUC',
    ),
    'United States': _route(
        'Los Angeles International Airport', 'LAX',
        'John F. Kennedy International Airport', 'JFK',
    ),
})

DEFAULT_ROUTE = _route('International Airport', 'INT', 'Destination Airport', 'DST')


def plausible_route(airline: Optional[str], origin_country: Optional[str]) -> RouteDefault:
    """Airline-specific route, else country-specific route, else the generic placeholder."""
    if airline and airline in AIRLINE_ROUTES:
        return AIRLINE_ROUTES[airline]
    if origin_country and origin_country in COUNTRY_ROUTES:
        return COUNTRY_ROUTES[origin_country]
    return DEFAULT_ROUTE
