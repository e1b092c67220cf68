"""
Recommendation service for picking the next sentences to practice.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
import logging
import random
from typing import Dict, List

from sqlalchemy import or_
from sqlmodel import Session, func, select

from app.models import Category, Sentence
from app.models.category import DEFAULT_CATEGORY_COLOR
from app.services.practice_log_service import practice_counts_by_sentence

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 10
UNPRACTICED_TARGET = 7
REINFORCE_TARGET = 3
REINFORCE_MIN_PRACTICES = 1
REINFORCE_MAX_PRACTICES = 3


def _candidate_query(user_id: int):
    """Playable sentences visible to the user: shared or own, with audio, in a live category."""
    return (
        select(Sentence, Category)
        .join(Category, Sentence.category_id == Category.id)
        .where(
            Category.deleted_at.is_(None),
            or_(Sentence.is_shared == True, Sentence.user_id == user_id),  # noqa: E712
            Sentence.audio_url.isnot(None)
        )
    )


def _serialize(sentence: Sentence, category: Category) -> Dict:
    return {
        "id": sentence.id,
        "english_text": sentence.english_text,
        "chinese_text": sentence.chinese_text,
        "difficulty": sentence.difficulty,
        "audio_url": sentence.audio_url,
        "category": {
            "id": category.id,
            "name": category.name,
            "color": category.color if category.color is not None else DEFAULT_CATEGORY_COLOR,
        },
    }


def get_recommendations(
    session: Session,
    user_id: int,
    limit: int = RECOMMENDATION_LIMIT
) -> List[Dict]:
    """
    Pick sentences for a "For You" practice session.

    Mixes sentences the user has never practiced (up to 7) with sentences
    practiced only 1-3 times (up to 3), tops up with any other playable
    sentence when short, then shuffles.

    Args:
        session: Database session
        user_id: User to recommend for
        limit: Maximum number of sentences to return

    Returns:
        List of sentence dicts (at most `limit`), each with its category
    """
    practice_counts = practice_counts_by_sentence(session, user_id)
    practiced_ids = list(practice_counts.keys())
    reinforce_ids = [
        sentence_id for sentence_id, count in practice_counts.items()
        if REINFORCE_MIN_PRACTICES <= count <= REINFORCE_MAX_PRACTICES
    ]

    unpracticed_query = _candidate_query(user_id)
    if practiced_ids:
        unpracticed_query = unpracticed_query.where(Sentence.id.not_in(practiced_ids))
    unpracticed_rows = session.exec(
        unpracticed_query.order_by(func.random()).limit(UNPRACTICED_TARGET)
    ).all()

    reinforce_rows = []
    if reinforce_ids:
        reinforce_rows = session.exec(
            _candidate_query(user_id)
            .where(Sentence.id.in_(reinforce_ids))
            .order_by(func.random())
            .limit(REINFORCE_TARGET)
        ).all()

    seen_ids = set()
    merged = []
    for sentence, category in [*unpracticed_rows, *reinforce_rows]:
        if sentence.id not in seen_ids:
            seen_ids.add(sentence.id)
            merged.append((sentence, category))

    if len(merged) < limit:
        supplement_query = _candidate_query(user_id)
        if seen_ids:
            supplement_query = supplement_query.where(Sentence.id.not_in(list(seen_ids)))
        supplement_rows = session.exec(
            supplement_query.order_by(func.random()).limit(limit - len(merged))
        ).all()
        for sentence, category in supplement_rows:
            if sentence.id not in seen_ids:
                seen_ids.add(sentence.id)
                merged.append((sentence, category))

    random.shuffle(merged)
    result = [_serialize(sentence, category) for sentence, category in merged[:limit]]

    logger.info(
        f"Recommended {len(result)} sentences for user {user_id} "
        f"({len(unpracticed_rows)} new, {len(reinforce_rows)} reinforce)"
    )
    return result
