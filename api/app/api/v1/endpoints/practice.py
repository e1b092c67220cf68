"""
Practice activity endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional
import logging

from app.core.database import get_session
from app.core.exceptions import ValidationError
from app.core.security import get_current_user_id
from app.schemas.practice import (
    CalendarResponse,
    DailyCountResponse,
    HistoryPageResponse,
    LogPracticeRequest,
    LogPracticeResponse,
    RecommendationsResponse
)
from app.services.practice_log_service import log_events, log_results
from app.services.practice_stats_service import get_calendar, get_daily_counts, get_history_page
from app.services.recommendation_service import get_recommendations
from app.utils.date_utils import local_today, normalize_utc_offset
from app.api.v1.endpoints.utils import lenient_month, lenient_page, lenient_year

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/practice", tags=["practice"])


@router.get("/calendar", response_model=CalendarResponse)
async def practice_calendar(
    year: Optional[str] = None,
    month: Optional[str] = None,
    utc_offset: Optional[str] = Query(None, alias="utcOffset"),
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Get the local dates in a month on which the user practiced.

    year and month default to the current local month; utcOffset is the
    client's offset from UTC in minutes (e.g. 60 for UTC+1). Malformed values
    fall back to their defaults instead of failing the request.
    """
    offset = normalize_utc_offset(utc_offset)
    today = local_today(offset)
    dates = get_calendar(
        session,
        user_id,
        lenient_year(year, today.year),
        lenient_month(month, today.month),
        offset
    )
    return CalendarResponse(dates=dates)


@router.get("/daily-count", response_model=DailyCountResponse)
async def practice_daily_count(
    utc_offset: Optional[str] = Query(None, alias="utcOffset"),
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get practice counts for the last 21 local days (oldest first, zero-filled)."""
    offset = normalize_utc_offset(utc_offset)
    return DailyCountResponse(data=get_daily_counts(session, user_id, offset))


@router.get("/history", response_model=HistoryPageResponse)
async def practice_history(
    page: Optional[str] = None,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Get one day of practice history.

    page counts UTC days back from today (0 = today). hasMore tells whether
    any older practice exists, so clients can keep paging past empty days.
    """
    return HistoryPageResponse(**get_history_page(session, user_id, lenient_page(page)))


@router.post("/log", response_model=LogPracticeResponse)
async def log_practice(
    request: LogPracticeRequest,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Record the sentences practiced in a session.

    Accepts either sentenceIds (plain list) or sentences (with score and
    transcript). An empty list records nothing and returns logged = 0.
    """
    if request.sentence_ids is not None and request.sentences is not None:
        raise ValidationError("Provide either sentenceIds or sentences, not both")

    if request.sentences is not None:
        logged = log_results(
            session,
            user_id,
            [item.model_dump() for item in request.sentences]
        )
    else:
        logged = log_events(session, user_id, request.sentence_ids or [])

    return LogPracticeResponse(logged=logged)


@router.get("/for-you", response_model=RecommendationsResponse)
async def practice_for_you(
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get up to 10 sentences to practice, mixing new sentences with ones that need reinforcement."""
    sentences = get_recommendations(session, user_id)
    return RecommendationsResponse(sentences=sentences, total=len(sentences))
