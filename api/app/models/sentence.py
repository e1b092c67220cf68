"""
Sentence model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

from app.utils.date_utils import utc_now

if TYPE_CHECKING:
    from app.models.category import Category
    from app.models.practice_log import PracticeLog

DEFAULT_DIFFICULTY = "medium"


class Sentence(SQLModel, table=True):
    """Sentence table - library entries that can be practiced."""
    __tablename__ = "sentences"

    id: Optional[int] = Field(default=None, primary_key=True)
    english_text: str
    chinese_text: Optional[str] = None  # Translation, may be missing
    category_id: int = Field(foreign_key="categories.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    difficulty: Optional[str] = Field(default=DEFAULT_DIFFICULTY, max_length=20)  # 'easy', 'medium' or 'hard'
    notes: Optional[str] = None
    is_shared: bool = Field(default=False, index=True)
    audio_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())

    # Relationships
    category: "Category" = Relationship(back_populates="sentences")
    practice_logs: List["PracticeLog"] = Relationship(back_populates="sentence")
