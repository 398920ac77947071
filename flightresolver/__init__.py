"""
Flight resolver package.

Resolves a flight identifier into one normalized flight record by querying
unreliable external providers, merging their output, and falling back to
synthetic data so a lookup never fails.

Modules:
    models/       NormalizedFlightRecord and tagged provider results
    enrichment/   Static airline, airport and route tables
    providers/    AviationStack (schedule) and OpenSky (live) adapters
    services/     Status inference and synthetic fallback records
    resolver.py   Provider sequencing, merge policy, airport lookup
    api/          REST endpoints (Flask blueprint)
    config.py     Centralized configuration from environment variables
"""

from flightresolver.resolver import AirportInfo, FlightResolver, merge_live_status

__version__ = '1.0.0'

__all__ = ['AirportInfo', 'FlightResolver', 'merge_live_status']
