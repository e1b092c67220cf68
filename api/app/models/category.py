"""
Category model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

from app.utils.date_utils import utc_now

if TYPE_CHECKING:
    from app.models.sentence import Sentence

DEFAULT_CATEGORY_COLOR = "#3b82f6"


class Category(SQLModel, table=True):
    """Category table - preset or user-defined grouping of sentences."""
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    description: Optional[str] = None
    color: Optional[str] = Field(default=DEFAULT_CATEGORY_COLOR, max_length=20)
    is_preset: bool = Field(default=False, index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)  # None for presets
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    deleted_at: Optional[datetime] = Field(default=None, sa_type=DateTime())  # Soft delete

    # Relationships
    sentences: List["Sentence"] = Relationship(back_populates="category")
