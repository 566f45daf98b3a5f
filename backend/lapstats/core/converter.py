"""Unit conversion helpers.

Pure functions, no rounding: callers format the results however they like.
"""

from lapstats.core.constants import KILOMETRE_M, MILE_M, SECONDS_PER_HOUR


def metres_to_miles(metres: float) -> float:
    return metres / MILE_M


def miles_to_metres(miles: float) -> float:
    return miles * MILE_M


def metres_to_kilometres(metres: float) -> float:
    return metres / KILOMETRE_M


def kilometres_to_metres(kilometres: float) -> float:
    return kilometres * KILOMETRE_M


def mps_to_mph(speed: float) -> float:
    """Convert metres/second -> miles/hour."""
    return speed * SECONDS_PER_HOUR / MILE_M


def mps_to_kph(speed: float) -> float:
    """Convert metres/second -> kilometres/hour."""
    return speed * SECONDS_PER_HOUR / KILOMETRE_M


def seconds_to_human_readable(seconds: float) -> str:
    """
    Format a duration as 'M:SS' or, from one hour up, 'H:MM:SS'.
    Example: 452.7 -> '7:32', 3725 -> '1:02:05'
    """
    total = int(seconds) if seconds and seconds > 0 else 0

    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
