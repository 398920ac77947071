"""
API module for the flight resolver.

Provides REST endpoints for flight and airport lookups.
"""

from flightresolver.api.flights import flights_bp

__all__ = ['flights_bp']
