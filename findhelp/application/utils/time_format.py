from __future__ import annotations

from datetime import datetime

from findhelp.domain.entities.opening_time import TimeValue

# Indexed by Monday-origin schedule day.
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

NOT_AVAILABLE = "N/A"


def time_to_minutes(value: TimeValue | None) -> int | None:
    """Minutes since midnight.

    A missing value counts as midnight. A colon string that does not parse
    returns None so the slot it belongs to can never match.
    """
    if value is None:
        return 0
    return value.to_minutes()


def format_time(value: TimeValue | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return value.label()


def day_label(day: int) -> str:
    return DAY_NAMES[day]


def schedule_day(now: datetime) -> int:
    # datetime.weekday() is already Monday-origin, matching stored slot days.
    return now.weekday()


def minutes_since_midnight(now: datetime) -> int:
    return now.hour * 60 + now.minute


def format_distance(distance: float | None) -> str:
    if distance is None:
        return ""
    return f"{distance:.1f} km away"
