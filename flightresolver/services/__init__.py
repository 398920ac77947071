"""
Pure resolution services: status inference and synthetic fallback data.

Nothing here makes network calls.
"""

from flightresolver.services.status import infer_status
from flightresolver.services.synthetic import SyntheticFlightGenerator

__all__ = ['infer_status', 'SyntheticFlightGenerator']
