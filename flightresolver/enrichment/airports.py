"""
Airport lookup by IATA or ICAO code.

Static, read-only reference data used to fill airport names into records
whose provider only returned codes, and to answer airport lookups without
a network call.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

UNKNOWN = 'Unknown'


@dataclass(frozen=True)
class AirportEntry:
    """Airport details from reference data."""
    icao: str
    iata: str
    name: str
    city: str
    country: str


_AIRPORTS = (
    AirportEntry('EDDF', 'FRA', 'Frankfurt Airport', 'Frankfurt', 'Germany'),
    AirportEntry('EDDM', 'MUC', 'Munich Airport', 'Munich', 'Germany'),
    AirportEntry('EGLL', 'LHR', 'London Heathrow Airport', 'London', 'United Kingdom'),
    AirportEntry('EGKK', 'LGW', 'London Gatwick Airport', 'London', 'United Kingdom'),
    AirportEntry('EHAM', 'AMS', 'Amsterdam Airport Schiphol', 'Amsterdam', 'Netherlands'),
    AirportEntry('LFPG', 'CDG', 'Charles de Gaulle Airport', 'Paris', 'France'),
    AirportEntry('KJFK', 'JFK', 'John F. Kennedy International Airport', 'New York', 'United States'),
    AirportEntry('KLAX', 'LAX', 'Los Angeles International Airport', 'Los Angeles', 'United States'),
    AirportEntry('KSFO', 'SFO', 'San Francisco International Airport', 'San Francisco', 'United States'),
    AirportEntry('KDFW', 'DFW', 'Dallas/Fort Worth International Airport', 'Dallas', 'United States'),
    AirportEntry('KATL', 'ATL', 'Hartsfield-Jackson Atlanta International Airport', 'Atlanta', 'United States'),
    AirportEntry('PHNL', 'HNL', 'Honolulu International Airport', 'Honolulu', 'United States'),
    AirportEntry('VIDP', 'DEL', 'Indira Gandhi International Airport', 'Delhi', 'India'),
    AirportEntry('VABB', 'BOM', 'Chhatrapati Shivaji Maharaj International Airport', 'Mumbai', 'India'),
    AirportEntry('VOBL', 'BLR', 'Kempegowda International Airport', 'Bangalore', 'India'),
    AirportEntry('VOMM', 'MAA', 'Chennai International Airport', 'Chennai', 'India'),
    AirportEntry('VECC', 'CCU', 'Netaji Subhash Chandra Bose International Airport', 'Kolkata', 'India'),
    AirportEntry('YSSY', 'SYD', 'Sydney Kingsford Smith Airport', 'Sydney', 'Australia'),
    AirportEntry('YMML', 'MEL', 'Melbourne Airport', 'Melbourne', 'Australia'),
    AirportEntry('NZAA', 'AKL', 'Auckland Airport', 'Auckland', 'New Zealand'),
    AirportEntry('RJTT', 'HND', 'Tokyo Haneda Airport', 'Tokyo', 'Japan'),
    AirportEntry('RKSI', 'ICN', 'Incheon International Airport', 'Seoul', 'South Korea'),
    AirportEntry('ZBAA', 'PEK', 'Beijing Capital International Airport', 'Beijing', 'China'),
    AirportEntry('ZSPD', 'PVG', 'Shanghai Pudong International Airport', 'Shanghai', 'China'),
    AirportEntry('OMDB', 'DXB', 'Dubai International Airport', 'Dubai', 'United Arab Emirates'),
    AirportEntry('OTHH', 'DOH', 'Hamad International Airport', 'Doha', 'Qatar'),
    AirportEntry('WSSS', 'SIN', 'Singapore Changi Airport', 'Singapore', 'Singapore'),
    AirportEntry('VTBS', 'BKK', 'Suvarnabhumi Airport', 'Bangkok', 'Thailand'),
    AirportEntry('VHHH', 'HKG', 'Hong Kong International Airport', 'Hong Kong', 'Hong Kong'),
)


def _index(entries) -> Dict[str, AirportEntry]:
    index: Dict[str, AirportEntry] = {}
    for entry in entries:
        index[entry.icao] = entry
        index[entry.iata] = entry
    return index


# Keyed by both ICAO (4 letters) and IATA (3 letters); the two never collide
AIRPORTS: Mapping[str, AirportEntry] = MappingProxyType(_index(_AIRPORTS))


def get_airport(code: str) -> Optional[AirportEntry]:
    """Look up airport by IATA or ICAO code. Returns None if not found."""
    if not code:
        return None
    return AIRPORTS.get(code.strip().upper())


def airport_name(code: str) -> str:
    """Airport name for a code, or a generic '<CODE> Airport' placeholder."""
    entry = get_airport(code)
    if entry:
        return entry.name
    return f'{(code or "").strip().upper()} Airport'
