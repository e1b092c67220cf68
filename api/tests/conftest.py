"""
Shared Test Fixtures and Configuration

Tests run against an in-memory SQLite database. DATABASE_URL must be set
before anything under app/ is imported, because settings are validated at
import time.
"""

import os
from datetime import datetime
from typing import Generator, Optional

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUTH_SECRET", "test-secret-for-signing-bearer-tokens")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.database import get_session
from app.main import app
from app.models import Category, PracticeLog, Sentence, User


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def engine():
    """Fresh in-memory database with all tables created."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    """Database session bound to the in-memory engine."""
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def client(session: Session) -> Generator[TestClient, None, None]:
    """
    FastAPI test client whose requests share the test session.

    Server exceptions are returned as responses so the 500 handler can be
    asserted on.
    """

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# ============================================================================
# Data Factories
# ============================================================================


@pytest.fixture
def user(session: Session) -> User:
    """The user making requests in most tests."""
    return make_user(session, "learner@example.com")


@pytest.fixture
def other_user(session: Session) -> User:
    """A second user whose data must never leak into the first user's views."""
    return make_user(session, "other@example.com")


@pytest.fixture
def category(session: Session, user: User) -> Category:
    """A live preset category with an explicit color."""
    return make_category(session, name="Daily Life", color="#ef4444")


@pytest.fixture
def sentence(session: Session, user: User, category: Category) -> Sentence:
    """A shared sentence with audio."""
    return make_sentence(session, owner=user, category=category, english_text="How are you?")


def make_user(session: Session, email: str) -> User:
    new_user = User(email=email, name=email.split("@")[0])
    session.add(new_user)
    session.commit()
    session.refresh(new_user)
    return new_user


def make_category(
    session: Session,
    name: str = "General",
    color: Optional[str] = "#3b82f6",
    deleted_at: Optional[datetime] = None,
) -> Category:
    new_category = Category(name=name, color=color, is_preset=True, deleted_at=deleted_at)
    session.add(new_category)
    session.commit()
    session.refresh(new_category)
    return new_category


def make_sentence(
    session: Session,
    owner: User,
    category: Category,
    english_text: str = "Nice to meet you.",
    chinese_text: Optional[str] = "很高兴认识你。",
    difficulty: Optional[str] = "easy",
    is_shared: bool = True,
    audio_url: Optional[str] = "https://cdn.example.com/audio/1.mp3",
) -> Sentence:
    new_sentence = Sentence(
        english_text=english_text,
        chinese_text=chinese_text,
        category_id=category.id,
        user_id=owner.id,
        difficulty=difficulty,
        is_shared=is_shared,
        audio_url=audio_url,
    )
    session.add(new_sentence)
    session.commit()
    session.refresh(new_sentence)
    return new_sentence


def add_log(
    session: Session,
    user_id: int,
    sentence_id: int,
    practiced_at: datetime,
    score: Optional[int] = None,
    transcript: Optional[str] = None,
) -> PracticeLog:
    """Insert a practice log with an explicit timestamp."""
    log = PracticeLog(
        user_id=user_id,
        sentence_id=sentence_id,
        practiced_at=practiced_at,
        score=score,
        transcript=transcript,
    )
    session.add(log)
    session.commit()
    session.refresh(log)
    return log
