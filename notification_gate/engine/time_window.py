"""
Time-window helpers for DND checks.
Everything works in minutes since midnight UTC (0..1439).
"""

import re
from datetime import datetime, timezone
from typing import Union

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")


class InvalidTimeOfDay(ValueError):
    """Raised when a time-of-day string is not a valid 24h HH:MM value."""


def parse_time_of_day(hhmm: str) -> int:
    """
    'HH:MM' -> minutes since midnight, e.g. '22:00' -> 1320.
    Rejects anything outside 00:00..23:59 instead of rolling it past 1439.
    """
    match = _HHMM.fullmatch(hhmm) if isinstance(hhmm, str) else None
    if not match:
        raise InvalidTimeOfDay(f"Invalid time format: {hhmm!r}. Use HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeOfDay(f"Time out of range: {hhmm!r}. Use 00:00-23:59")
    return hours * 60 + minutes


def minutes_since_midnight(instant: Union[datetime, str]) -> int:
    """UTC hour*60 + minute of an instant. Naive datetimes are taken as UTC."""
    if isinstance(instant, str):
        instant = datetime.fromisoformat(instant.replace("Z", "+00:00"))
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.hour * 60 + instant.minute


def in_window(now: int, start: int, end: int) -> bool:
    """
    Half-open [start, end) on a 1440-minute clock.
    start == end means the window is switched off, not a full day.
    """
    if start == end:
        return False
    if start < end:
        return start <= now < end
    # 22:00-07:00 style window, wraps past midnight
    return now >= start or now < end
