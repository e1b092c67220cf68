"""
Models package - imports all models so they register with SQLModel metadata.
"""
from app.models.user import User
from app.models.category import Category
from app.models.sentence import Sentence
from app.models.practice_log import PracticeLog

__all__ = [
    'User',
    'Category',
    'Sentence',
    'PracticeLog',
]
