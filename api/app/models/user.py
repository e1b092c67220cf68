"""
User model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

from app.utils.date_utils import utc_now

if TYPE_CHECKING:
    from app.models.practice_log import PracticeLog


class User(SQLModel, table=True):
    """User table - owned by the auth service, read here for foreign keys only."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default="user", max_length=20)  # 'owner', 'admin' or 'user'
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())

    # Relationships
    practice_logs: List["PracticeLog"] = Relationship(back_populates="user")
