"""
PracticeLog model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime, Index
from typing import Optional, TYPE_CHECKING
from datetime import datetime

from app.utils.date_utils import utc_now

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.sentence import Sentence


class PracticeLog(SQLModel, table=True):
    """Practice log table - one append-only row per practiced sentence.

    practiced_at is a naive UTC timestamp set when the row is written; it is
    never taken from the client and never updated.
    """
    __tablename__ = "practice_logs"
    __table_args__ = (
        Index("practice_logs_user_practiced_at_idx", "user_id", "practiced_at"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    sentence_id: int = Field(foreign_key="sentences.id", index=True)
    practiced_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())  # Naive UTC
    score: Optional[int] = None
    transcript: Optional[str] = None

    # Relationships
    user: "User" = Relationship(back_populates="practice_logs")
    sentence: "Sentence" = Relationship(back_populates="practice_logs")
