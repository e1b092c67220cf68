"""
Practice statistics service.

Builds the calendar, daily-count and history views from practice logs.

The calendar and daily-count views bucket events by the client's local day
(fixed UTC offset). The history pager buckets by UTC calendar day and takes
no offset; the two bases are intentionally kept separate.
"""
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from sqlmodel import Session

from app.models.category import DEFAULT_CATEGORY_COLOR
from app.models.sentence import DEFAULT_DIFFICULTY
from app.services.practice_log_service import (
    count_by_local_date,
    distinct_local_dates,
    fetch_enriched_range,
    has_events_before,
)
from app.utils.date_utils import (
    format_utc_instant,
    local_midnight_utc,
    local_today,
    utc_day_range,
)

logger = logging.getLogger(__name__)

DAILY_COUNT_DAYS = 21


def get_calendar(
    session: Session,
    user_id: int,
    year: int,
    month: int,
    offset_minutes: int
) -> List[str]:
    """
    Local dates within a local month on which the user practiced.

    Args:
        session: Database session
        user_id: User whose practice logs are read
        year: Local calendar year
        month: Local calendar month (1-12)
        offset_minutes: Normalized UTC offset in minutes

    Returns:
        Distinct 'YYYY-MM-DD' strings in ascending order (empty if none)
    """
    start = local_midnight_utc(year, month, 1, offset_minutes)
    end = local_midnight_utc(year, month + 1, 1, offset_minutes)
    dates = distinct_local_dates(session, user_id, start, end, offset_minutes)
    logger.debug(f"Calendar {year}-{month:02d} (offset {offset_minutes}) for user {user_id}: {len(dates)} days")
    return dates


def get_daily_counts(
    session: Session,
    user_id: int,
    offset_minutes: int,
    now: Optional[datetime] = None
) -> List[Dict]:
    """
    Practice counts for the 21 local days ending today, oldest first.

    Days without practice are included with a count of 0, so the result always
    has exactly 21 consecutive entries.
    """
    today = local_today(offset_minutes, now)
    start = local_midnight_utc(today.year, today.month, today.day - (DAILY_COUNT_DAYS - 1), offset_minutes)
    end = local_midnight_utc(today.year, today.month, today.day + 1, offset_minutes)
    counts = count_by_local_date(session, user_id, start, offset_minutes, end=end)

    window_start = today - timedelta(days=DAILY_COUNT_DAYS - 1)
    data = []
    for i in range(DAILY_COUNT_DAYS):
        date_str = (window_start + timedelta(days=i)).isoformat()
        data.append({"date": date_str, "count": counts.get(date_str, 0)})
    logger.debug(f"Daily counts from {window_start} (offset {offset_minutes}) for user {user_id}: {sum(counts.values())} events")
    return data


def get_history_page(
    session: Session,
    user_id: int,
    page: int,
    now: Optional[datetime] = None
) -> Dict:
    """
    One UTC day of practice history, most recent first.

    Args:
        session: Database session
        user_id: User whose history is read
        page: Days before today in UTC (0 = today, 1 = yesterday, ...)
        now: Reference instant (defaults to now, UTC)

    Returns:
        Dict with 'date', 'records' and 'has_more'. has_more is True when any
        event exists before this day, so an empty day can still have more.
    """
    day_start, day_end = utc_day_range(page, now)

    rows = fetch_enriched_range(session, user_id, day_start, day_end)
    # Separate read from the page query, not snapshot-consistent with it
    has_more = has_events_before(session, user_id, day_start)

    records = []
    for log, sentence, category in rows:
        records.append({
            "id": log.id,
            "score": log.score,
            "transcript": log.transcript,
            "practiced_at": format_utc_instant(log.practiced_at),
            "sentence": {
                "id": sentence.id,
                "english_text": sentence.english_text,
                "chinese_text": sentence.chinese_text,
                "difficulty": sentence.difficulty if sentence.difficulty is not None else DEFAULT_DIFFICULTY,
                "category": {
                    "id": category.id,
                    "name": category.name,
                    "color": category.color if category.color is not None else DEFAULT_CATEGORY_COLOR,
                },
            },
        })

    logger.debug(f"History page {page} ({day_start.date()}) for user {user_id}: {len(records)} records")
    return {
        "date": day_start.date().isoformat(),
        "records": records,
        "has_more": has_more,
    }
