"""
Practice log store access.

Writes practice events in batches and provides the range/group scans the
practice statistics views are built on. Local-day grouping is computed at
read time from practiced_at, never stored, so a user changing their UTC
offset between requests still gets correct buckets for historical data.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import Integer, String, and_, literal_column
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement
from sqlmodel import Session, func, select

from app.models import Category, PracticeLog, Sentence
from app.utils.date_utils import utc_now

logger = logging.getLogger(__name__)


class local_date(FunctionElement):
    """YYYY-MM-DD of a UTC timestamp column shifted by a fixed number of minutes."""
    type = String()
    name = "local_date"
    inherit_cache = True


@compiles(local_date)
def _compile_local_date(element, compiler, **kw):
    column, offset = list(element.clauses)
    return (
        f"to_char({compiler.process(column, **kw)} + "
        f"({compiler.process(offset, **kw)} * INTERVAL '1 minute'), 'YYYY-MM-DD')"
    )


@compiles(local_date, "sqlite")
def _compile_local_date_sqlite(element, compiler, **kw):
    column, offset = list(element.clauses)
    return (
        f"strftime('%Y-%m-%d', {compiler.process(column, **kw)}, "
        f"printf('%+d minutes', {compiler.process(offset, **kw)}))"
    )


def local_date_expr(column, offset_minutes: int):
    """
    SQL expression for the local calendar date of a timestamp column.

    The offset is rendered inline rather than bound so the identical expression
    can appear in SELECT and GROUP BY. It must already be normalized.

    Args:
        column: Timestamp column holding naive UTC instants
        offset_minutes: Normalized UTC offset in minutes

    Returns:
        String-typed SQL expression yielding 'YYYY-MM-DD'
    """
    return local_date(column, literal_column(str(int(offset_minutes)), Integer))


def log_results(
    session: Session,
    user_id: int,
    results: Sequence[Dict],
    practiced_at: Optional[datetime] = None
) -> int:
    """
    Insert one practice log per result in a single transaction.

    Each result is a dict with 'sentence_id' and optional 'score' and
    'transcript'. Duplicates are kept; every entry is a separate practice.

    Args:
        session: Database session
        user_id: Owner of the practice events
        results: Practice results to record
        practiced_at: Override for the insert timestamp (defaults to now, UTC)

    Returns:
        Number of rows inserted
    """
    if not results:
        return 0

    timestamp = practiced_at or utc_now()
    rows = [
        PracticeLog(
            user_id=user_id,
            sentence_id=result["sentence_id"],
            score=result.get("score"),
            transcript=result.get("transcript"),
            practiced_at=timestamp
        )
        for result in results
    ]

    session.add_all(rows)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error logging {len(rows)} practice events for user {user_id}: {str(e)}")
        raise

    logger.info(f"Logged {len(rows)} practice events for user {user_id}")
    return len(rows)


def log_events(
    session: Session,
    user_id: int,
    sentence_ids: Iterable[int],
    practiced_at: Optional[datetime] = None
) -> int:
    """Insert one practice log per sentence id. An empty list is a no-op returning 0."""
    return log_results(
        session,
        user_id,
        [{"sentence_id": sentence_id} for sentence_id in sentence_ids],
        practiced_at=practiced_at
    )


def distinct_local_dates(
    session: Session,
    user_id: int,
    start: datetime,
    end: datetime,
    offset_minutes: int
) -> List[str]:
    """Distinct local dates (ascending) with at least one event in [start, end)."""
    practice_date = local_date_expr(PracticeLog.practiced_at, offset_minutes).label("practice_date")
    query = (
        select(practice_date)
        .where(
            PracticeLog.user_id == user_id,
            PracticeLog.practiced_at >= start,
            PracticeLog.practiced_at < end
        )
        .distinct()
        .order_by(practice_date)
    )
    return list(session.exec(query).all())


def count_by_local_date(
    session: Session,
    user_id: int,
    start: datetime,
    offset_minutes: int,
    end: Optional[datetime] = None
) -> Dict[str, int]:
    """Event counts keyed by local date for events at or after start (and before end, if given)."""
    practice_date = local_date_expr(PracticeLog.practiced_at, offset_minutes)
    conditions = [
        PracticeLog.user_id == user_id,
        PracticeLog.practiced_at >= start
    ]
    if end is not None:
        conditions.append(PracticeLog.practiced_at < end)

    query = (
        select(
            practice_date.label("practice_date"),
            func.count(PracticeLog.id).label("count")
        )
        .where(*conditions)
        .group_by(practice_date)
    )
    results = session.exec(query).all()
    return {row.practice_date: int(row.count or 0) for row in results}


def fetch_enriched_range(
    session: Session,
    user_id: int,
    start: datetime,
    end: datetime
):
    """
    Practice logs in [start, end) joined with their sentence and category.

    Rows are ordered most recent first, with id as the tiebreaker. Each row
    is a (PracticeLog, Sentence, Category) tuple.
    """
    query = (
        select(PracticeLog, Sentence, Category)
        .join(Sentence, PracticeLog.sentence_id == Sentence.id)
        .join(Category, Sentence.category_id == Category.id)
        .where(
            and_(
                PracticeLog.user_id == user_id,
                PracticeLog.practiced_at >= start,
                PracticeLog.practiced_at < end
            )
        )
        .order_by(PracticeLog.practiced_at.desc(), PracticeLog.id.desc())
    )
    return session.exec(query).all()


def has_events_before(session: Session, user_id: int, instant: datetime) -> bool:
    """Whether the user has any practice event strictly before the instant."""
    query = (
        select(PracticeLog.id)
        .where(
            PracticeLog.user_id == user_id,
            PracticeLog.practiced_at < instant
        )
        .limit(1)
    )
    return session.exec(query).first() is not None


def practice_counts_by_sentence(session: Session, user_id: int) -> Dict[int, int]:
    """Number of times the user has practiced each sentence."""
    query = (
        select(
            PracticeLog.sentence_id,
            func.count(PracticeLog.id).label("count")
        )
        .where(PracticeLog.user_id == user_id)
        .group_by(PracticeLog.sentence_id)
    )
    results = session.exec(query).all()
    return {row.sentence_id: int(row.count) for row in results}
