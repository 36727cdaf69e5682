"""Date utilities for the Paris-local tournament schedule."""

import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo

PARIS_TZ = ZoneInfo("Europe/Paris")

TIME_PATTERN = re.compile(r"^(\d{1,2})\s*[:hH]\s*(\d{2})")


def paris_now(now: Optional[datetime] = None) -> datetime:
    """
    Current (or given) instant as an aware Europe/Paris datetime.

    A naive `now` is read as UTC.
    """
    if now is None:
        return datetime.now(PARIS_TZ)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(PARIS_TZ)


def paris_today(now: Optional[datetime] = None) -> str:
    """Today's date in Paris as YYYY-MM-DD."""
    return paris_now(now).strftime("%Y-%m-%d")


def paris_current_time(now: Optional[datetime] = None) -> str:
    """Current Paris time as zero-padded HH:mm."""
    return paris_now(now).strftime("%H:%M")


def normalize_date(value: Optional[str]) -> Optional[str]:
    """Return `value` if it is a real YYYY-MM-DD date, else None."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        return None


def normalize_time(value: Optional[str]) -> Optional[str]:
    """
    Zero-pad a clock time: "9:05" -> "09:05", "21h30" -> "21:30".

    Returns None for anything that is not a valid 24h time.
    """
    if not value or not isinstance(value, str):
        return None
    match = TIME_PATTERN.match(value.strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return f"{hour:02d}:{minute:02d}"


def utc_to_paris(timestamp: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Convert an ISO 8601 timestamp to a Paris-local (date, time) pair.

    Conversion goes through the tz database so DST transitions are honoured.
    A timestamp without offset is read as UTC.

    Returns:
        ("YYYY-MM-DD", "HH:mm"), or None if the timestamp cannot be parsed
        or has no time part
    """
    if not timestamp or not isinstance(timestamp, str):
        return None
    value = timestamp.strip()
    # A bare date carries no start time
    if "T" not in value.upper() and " " not in value:
        return None
    if value.endswith("Z") or value.endswith("z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    local = paris_now(parsed)
    return local.strftime("%Y-%m-%d"), local.strftime("%H:%M")


def paris_datetime(date_str: str, time_str: str) -> datetime:
    """Aware datetime for a Paris-local date and HH:mm time."""
    naive = datetime.strptime(f"{date_str} {time_str}", "%Y-%m-%d %H:%M")
    return naive.replace(tzinfo=PARIS_TZ)


def shift_date(date_str: str, days: int) -> str:
    """Add `days` calendar days to a YYYY-MM-DD date."""
    base = datetime.strptime(date_str, "%Y-%m-%d")
    return (base + timedelta(days=days)).strftime("%Y-%m-%d")


def iter_dates(start: str, days: int) -> List[Tuple[str, int]]:
    """
    Calendar days from `start`, inclusive.

    Returns:
        List of (YYYY-MM-DD, weekday) with weekday 0=Monday ... 6=Sunday
    """
    base = datetime.strptime(start, "%Y-%m-%d")
    result = []
    for offset in range(max(days, 0)):
        day = base + timedelta(days=offset)
        result.append((day.strftime("%Y-%m-%d"), day.weekday()))
    return result


def display_dates(dates: List[str], today: str, before: int = 1, after: int = 7) -> List[str]:
    """Dates from the schedule within J-`before` ... J+`after` of today."""
    lower = shift_date(today, -before)
    upper = shift_date(today, after)
    return [d for d in dates if lower <= d <= upper]
