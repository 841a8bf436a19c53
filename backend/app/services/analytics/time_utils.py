"""
Calendar Helpers

Session timestamps are stored as UTC instants; streaks, "today" and daily
goals are about calendar days as the user experiences them. These helpers
translate between the two using the configured TIMEZONE.

Naive datetimes are treated as UTC.
"""

from datetime import date, datetime, time, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from app.config import settings


@lru_cache()
def _load_zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def get_timezone(name: Optional[str] = None) -> ZoneInfo:
    """Return the ZoneInfo for ``name`` (defaults to settings.TIMEZONE)."""
    return _load_zone(name or settings.TIMEZONE)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_today(now: Optional[datetime] = None) -> date:
    """Calendar date of ``now`` (default: current time) in the local timezone."""
    return day_key(now or utc_now())


def day_key(timestamp: datetime) -> date:
    """Local calendar date a timestamp falls on."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(get_timezone()).date()


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """
    First and last instant of a local calendar day.

    Returns:
        (00:00:00.000000, 23:59:59.999999) on ``day``, timezone-aware.
    """
    tz = get_timezone()
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, time.max, tzinfo=tz),
    )


def parse_range_bound(value: str, end: bool = False) -> datetime:
    """
    Parse a date-range query bound.

    A plain ``YYYY-MM-DD`` date expands to the start of that local day, or
    to its last instant when ``end`` is true. Full ISO-8601 timestamps are
    used as-is (naive ones are taken as UTC).

    Raises:
        ValueError: If ``value`` is not an ISO-8601 date or datetime.
    """
    value = value.strip()
    if len(value) == 10:
        start_of_day, end_of_day = day_bounds(date.fromisoformat(value))
        return end_of_day if end else start_of_day

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
