"""Abstract interface for flight data providers."""

import time
from datetime import datetime, timezone
from typing import Optional, Protocol, runtime_checkable

from flightresolver.models import ProviderResult


@runtime_checkable
class FlightProvider(Protocol):
    """Protocol for pluggable flight data providers."""

    name: str

    def resolve(self, identifier: str, deadline: Optional[float] = None) -> ProviderResult:
        """
        Look up a flight by identifier.

        deadline is an absolute time.monotonic() value; no request may
        outlive it. Misses and transient failures are returned, never raised.
        """
        ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def call_timeout(timeout: float, deadline: Optional[float]) -> Optional[float]:
    """
    Per-call timeout honouring an overall deadline.

    Returns None when the deadline has already passed.
    """
    if deadline is None:
        return timeout
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        return None
    return min(timeout, remaining)
