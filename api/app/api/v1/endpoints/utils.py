"""
Utility functions for endpoint operations.
"""
from typing import Optional

from app.utils.text_utils import parse_int

MIN_CALENDAR_YEAR = 1900
MAX_CALENDAR_YEAR = 9998
MAX_HISTORY_PAGE = 36500  # ~100 years back


def lenient_year(value: Optional[str], default: int) -> int:
    """Year from a query parameter, falling back to default when missing or unusable."""
    year = parse_int(value)
    if year is None or year < MIN_CALENDAR_YEAR or year > MAX_CALENDAR_YEAR:
        return default
    return year


def lenient_month(value: Optional[str], default: int) -> int:
    """Month (1-12) from a query parameter, falling back to default when missing or out of range."""
    month = parse_int(value)
    if month is None or month < 1 or month > 12:
        return default
    return month


def lenient_page(value: Optional[str]) -> int:
    """Non-negative page index from a query parameter, falling back to 0."""
    page = parse_int(value)
    if page is None or page < 0:
        return 0
    return min(page, MAX_HISTORY_PAGE)
