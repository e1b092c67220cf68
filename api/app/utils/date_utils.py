"""
Date utility functions for bucketing practice events into calendar days.

All instants are naive datetimes in UTC, which is how they are stored.
A client's local day is derived by shifting an instant by a fixed offset in
minutes (not a named timezone), so daylight-saving transitions are not
modelled.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple

from app.utils.text_utils import parse_int

MIN_UTC_OFFSET = -840  # UTC-14:00
MAX_UTC_OFFSET = 840  # UTC+14:00


def utc_now() -> datetime:
    """Current instant as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_utc_offset(raw_offset) -> int:
    """
    Normalize a client-supplied UTC offset in minutes.

    Absent, non-numeric or out-of-range values fall back to 0 (UTC) instead of
    failing the request.

    Args:
        raw_offset: None, an int, or a string such as "-300"

    Returns:
        Offset in minutes within [-840, 840]
    """
    if raw_offset is None or isinstance(raw_offset, bool):
        return 0
    if isinstance(raw_offset, int):
        offset = raw_offset
    else:
        offset = parse_int(raw_offset)
    if offset is None or offset < MIN_UTC_OFFSET or offset > MAX_UTC_OFFSET:
        return 0
    return offset


def local_midnight_utc(year: int, month: int, day: int, offset_minutes: int) -> datetime:
    """
    UTC instant of 00:00 local time on the given local calendar date.

    Month and day are normalized like a calendar: month 13 is January of the
    next year, day 0 is the last day of the previous month, and negative days
    keep rolling backwards.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    midnight = datetime(year, month, 1) + timedelta(days=day - 1)
    return midnight - timedelta(minutes=offset_minutes)


def civil_date_string(instant: datetime, offset_minutes: int) -> str:
    """Local calendar date of a UTC instant, formatted as YYYY-MM-DD."""
    return (instant + timedelta(minutes=offset_minutes)).date().isoformat()


def local_today(offset_minutes: int, now: Optional[datetime] = None) -> date:
    """Local calendar date of 'now' for the given offset."""
    if now is None:
        now = utc_now()
    return (now + timedelta(minutes=offset_minutes)).date()


def utc_day_range(days_ago: int, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """[start, end) of the UTC calendar day that is `days_ago` days before today (UTC)."""
    if now is None:
        now = utc_now()
    day = now.date() - timedelta(days=days_ago)
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)


def format_utc_instant(instant: datetime) -> str:
    """ISO-8601 representation of a naive UTC instant with a trailing 'Z'."""
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc).replace(tzinfo=None)
    return instant.isoformat(timespec="milliseconds") + "Z"
