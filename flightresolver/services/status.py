"""
Flight phase inference from schedule timestamps.

Used for schedule-only records; the live-position provider reports ground
state directly and never goes through here.
"""

from datetime import datetime
from typing import Optional

from flightresolver.models import FlightStatus


def _after(now: datetime, moment: Optional[datetime]) -> bool:
    return moment is not None and now > moment


def _before(now: datetime, moment: Optional[datetime]) -> bool:
    return moment is not None and now < moment


def infer_status(
    scheduled_departure: Optional[datetime],
    actual_departure: Optional[datetime],
    scheduled_arrival: Optional[datetime],
    actual_arrival: Optional[datetime],
    now: datetime,
) -> FlightStatus:
    """
    Determine flight status from timestamps.

    Logic (first match wins):
    - now past actual arrival → LANDED
    - now past actual departure →
        IN_FLIGHT while before actual arrival (or, lacking one, scheduled arrival),
        otherwise LANDED
    - now past scheduled arrival → LANDED
    - now past scheduled departure → IN_FLIGHT
    - otherwise → SCHEDULED

    Recorded times win over scheduled ones, and a flight past its scheduled
    arrival with nothing to the contrary is presumed landed. A comparison
    against a missing timestamp is false.
    """
    if _after(now, actual_arrival):
        return FlightStatus.LANDED

    if _after(now, actual_departure):
        if actual_arrival is not None:
            if _before(now, actual_arrival):
                return FlightStatus.IN_FLIGHT
        elif _before(now, scheduled_arrival):
            return FlightStatus.IN_FLIGHT
        return FlightStatus.LANDED

    if _after(now, scheduled_arrival):
        return FlightStatus.LANDED

    if _after(now, scheduled_departure):
        return FlightStatus.IN_FLIGHT

    return FlightStatus.SCHEDULED
