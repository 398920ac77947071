"""
Airline code lookups.

AIRLINE_NAMES maps two-letter IATA and three-letter ICAO designators to a
display name. The source list contains colliding keys (e.g. 'KL' appears as
both 'KLM Royal Dutch Airlines' and 'KLM'); the table is built from the
rows in order, so the last row for a key wins. This is a known data-quality
defect of the source list, not an intended mapping.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

UNKNOWN_AIRLINE = 'Unknown Airline'

_AIRLINE_CODE_ROWS: List[Tuple[str, str]] = [
    ('LH', 'Lufthansa'),
    ('DLH', 'Lufthansa'),
    ('BA', 'British Airways'),
    ('AF', 'Air France'),
    ('KL', 'KLM Royal Dutch Airlines'),
    ('EK', 'Emirates'),
    ('QR', 'Qatar Airways'),
    ('SQ', 'Singapore Airlines'),
    ('AI', 'Air India'),
    ('6E', 'IndiGo'),
    ('SG', 'SpiceJet'),
    ('G8', 'GoAir'),
    ('IX', 'Air India Express'),
    ('QF', 'Qantas Airways'),
    ('AA', 'American Airlines'),
    ('DL', 'Delta Air Lines'),
    ('UA', 'United Airlines'),
    ('WN', 'Southwest Airlines'),
    ('AC', 'Air Canada'),
    ('AF', 'Air France'),
    ('KL', 'KLM'),
    ('LX', 'Swiss International Air Lines'),
    ('OS', 'Austrian Airlines'),
    ('SN', 'Brussels Airlines'),
    ('IB', 'Iberia'),
    ('AZ', 'Alitalia'),
    ('TP', 'TAP Air Portugal'),
    ('AY', 'Finnair'),
    ('SK', 'SAS Scandinavian Airlines'),
    ('LO', 'LOT Polish Airlines'),
    ('OK', 'Czech Airlines'),
    ('RO', 'Tarom'),
    ('SU', 'Aeroflot'),
    ('TK', 'Turkish Airlines'),
    ('MS', 'EgyptAir'),
    ('ET', 'Ethiopian Airlines'),
    ('SA', 'South African Airways'),
    ('KQ', 'Kenya Airways'),
    ('QR', 'Qatar Airways'),
    ('EY', 'Etihad Airways'),
    ('SV', 'Saudia'),
    ('GF', 'Gulf Air'),
    ('KU', 'Kuwait Airways'),
    ('RJ', 'Royal Jordanian'),
    ('ME', 'Middle East Airlines'),
    ('MS', 'EgyptAir'),
    ('LY', 'El Al Israel Airlines'),
    ('TK', 'Turkish Airlines'),
    ('PC', 'Pegasus Airlines'),
    ('W6', 'Wizz Air'),
    ('FR', 'Ryanair'),
    ('U2', 'easyJet'),
    ('VY', 'Vueling'),
    ('IB', 'Iberia'),
    ('V7', 'Volotea'),
    ('HV', 'Transavia'),
    ('BE', 'Flybe'),
    ('T3', 'Eastern Airways'),
    ('B6', 'JetBlue Airways'),
    ('NK', 'Spirit Airlines'),
    ('F9', 'Frontier Airlines'),
    ('AS', 'Alaska Airlines'),
    ('HA', 'Hawaiian Airlines'),
    ('VX', 'Virgin America'),
    ('VS', 'Virgin Atlantic'),
    ('JL', 'Japan Airlines'),
    ('NH', 'All Nippon Airways'),
    ('KE', 'Korean Air'),
    ('OZ', 'Asiana Airlines'),
    ('CI', 'China Airlines'),
    ('BR', 'EVA Air'),
    ('CX', 'Cathay Pacific'),
    ('KA', 'Dragonair'),
    ('MF', 'Xiamen Airlines'),
    ('CZ', 'China Southern Airlines'),
    ('CA', 'Air China'),
    ('MU', 'China Eastern Airlines'),
    ('HU', 'Hainan Airlines'),
    ('3U', 'Sichuan Airlines'),
    ('9C', 'Spring Airlines'),
    ('HO', 'Juneyao Airlines'),
    ('JD', 'Beijing Capital Airlines'),
    ('GS', 'Tianjin Airlines'),
    ('PN', 'West Air'),
    ('G5', 'China Express Airlines'),
    ('8L', 'Lucky Air'),
    ('HX', 'Hong Kong Airlines'),
    ('FM', 'Shanghai Airlines'),
    ('ZH', 'Shenzhen Airlines'),
    ('D7', 'AirAsia X'),
    ('G9', 'Air Arabia'),
    ('I5', 'AirAsia India'),
    ('J2', 'Azerbaijan Airlines'),
    ('L5', 'Allegiant Air'),
    ('N4', 'Nordwind Airlines'),
    ('P5', 'Wingo'),
    ('Q2', 'Maldivian'),
    ('U4', 'Buddha Air'),
    ('W5', 'Mahan Air'),
    ('X3', 'TUIfly'),
    ('Y4', 'Volaris'),
    ('Z2', 'Philippines AirAsia'),
    # ICAO designators, as broadcast in ADS-B callsigns
    ('AAL', 'American Airlines'),
    ('DAL', 'Delta Air Lines'),
    ('UAL', 'United Airlines'),
    ('SWA', 'Southwest Airlines'),
    ('JBU', 'JetBlue Airways'),
    ('ASA', 'Alaska Airlines'),
    ('ACA', 'Air Canada'),
    ('BAW', 'British Airways'),
    ('AFR', 'Air France'),
    ('KLM', 'KLM'),
    ('UAE', 'Emirates'),
    ('QTR', 'Qatar Airways'),
    ('QFA', 'Qantas Airways'),
    ('ANA', 'All Nippon Airways'),
    ('JAL', 'Japan Airlines'),
    ('CPA', 'Cathay Pacific'),
    ('SIA', 'Singapore Airlines'),
    ('AIC', 'Air India'),
    ('IGO', 'IndiGo'),
    ('THY', 'Turkish Airlines'),
    ('ETD', 'Etihad Airways'),
]

AIRLINE_NAMES: Mapping[str, str] = MappingProxyType(dict(_AIRLINE_CODE_ROWS))

# ICAO airline designator -> IATA airline designator
ICAO_TO_IATA: Mapping[str, str] = MappingProxyType({
    'AAL': 'AA',  # American Airlines
    'DAL': 'DL',  # Delta
    'UAL': 'UA',  # United
    'SWA': 'WN',  # Southwest
    'JBU': 'B6',  # JetBlue
    'ASA': 'AS',  # Alaska
    'FFT': 'F9',  # Frontier
    'NKS': 'NK',  # Spirit
    'ACA': 'AC',  # Air Canada
    'WJA': 'WS',  # WestJet
    'BAW': 'BA',  # British Airways
    'DLH': 'LH',  # Lufthansa
    'AFR': 'AF',  # Air France
    'KLM': 'KL',  # KLM
    'UAE': 'EK',  # Emirates
    'QTR': 'QR',  # Qatar
    'QFA': 'QF',  # Qantas
    'ANA': 'NH',  # All Nippon
    'JAL': 'JL',  # Japan Airlines
    'CPA': 'CX',  # Cathay Pacific
    'SIA': 'SQ',  # Singapore
    'AIC': 'AI',  # Air India
    'IGO': '6E',  # IndiGo
    'THY': 'TK',  # Turkish
    'ETD': 'EY',  # Etihad
    'SKW': 'OO',  # SkyWest
    'RPA': 'YX',  # Republic
    'ENY': 'MQ',  # Envoy
    'FDX': 'FX',  # FedEx
    'UPS': '5X',  # UPS
})

IATA_TO_ICAO: Mapping[str, str] = MappingProxyType(
    {iata: icao for icao, iata in ICAO_TO_IATA.items()}
)


def airline_name(code: str) -> Optional[str]:
    """Look up airline name by IATA or ICAO designator. Returns None if not found."""
    if not code:
        return None
    return AIRLINE_NAMES.get(code.strip().upper())


def airline_from_callsign(callsign: Optional[str]) -> str:
    """
    Derive the operating airline from a callsign or flight number.

    Tries the three-letter ICAO prefix before the two-letter IATA prefix,
    so 'DLH400' resolves to Lufthansa rather than Delta ('DL').
    """
    if not callsign:
        return UNKNOWN_AIRLINE

    callsign = callsign.strip().upper()
    code3 = callsign[:3]
    if len(code3) == 3 and code3.isalpha() and code3 in AIRLINE_NAMES:
        return AIRLINE_NAMES[code3]

    code2 = callsign[:2]
    if code2 in AIRLINE_NAMES:
        return AIRLINE_NAMES[code2]

    return UNKNOWN_AIRLINE


def to_iata(designator: str) -> Optional[str]:
    """Convert ICAO airline designator to IATA. Returns None if unknown."""
    return ICAO_TO_IATA.get(designator.upper()) if designator else None


def to_icao(designator: str) -> Optional[str]:
    """Convert IATA airline designator to ICAO. Returns None if unknown."""
    return IATA_TO_ICAO.get(designator.upper()) if designator else None
