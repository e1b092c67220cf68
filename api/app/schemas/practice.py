"""
Practice schemas.

Wire format is camelCase (e.g. hasMore, practicedAt) to match the web and
mobile clients; attributes stay snake_case.
"""
from pydantic import BaseModel, Field, PositiveInt
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CalendarResponse(CamelModel):
    """Local dates in a month with at least one practice event."""
    dates: List[str]


class DailyCountData(CamelModel):
    """Practice count for a single local day."""
    date: str  # YYYY-MM-DD
    count: int


class DailyCountResponse(CamelModel):
    """Zero-filled practice counts for the trailing 21 local days, oldest first."""
    data: List[DailyCountData]


class CategorySummary(CamelModel):
    """Category attached to a sentence."""
    id: int
    name: str
    color: str


class HistorySentence(CamelModel):
    """Sentence attached to a history record."""
    id: int
    english_text: str
    chinese_text: Optional[str] = None
    difficulty: str
    category: CategorySummary


class HistoryRecord(CamelModel):
    """A single practice event in the history view."""
    id: int
    score: Optional[int] = None
    transcript: Optional[str] = None
    practiced_at: str  # ISO-8601, UTC
    sentence: HistorySentence


class HistoryPageResponse(CamelModel):
    """One UTC day of practice history."""
    date: str  # YYYY-MM-DD
    records: List[HistoryRecord]
    has_more: bool


class PracticeResultItem(CamelModel):
    """Result of practicing one sentence."""
    sentence_id: int = Field(..., gt=0, description="Practiced sentence ID")
    score: Optional[int] = Field(None, description="Pronunciation score, if scored")
    transcript: Optional[str] = Field(None, description="Speech recognition transcript, if any")


class LogPracticeRequest(CamelModel):
    """Request to record the sentences practiced in a session."""
    sentence_ids: Optional[List[PositiveInt]] = Field(None, description="IDs of practiced sentences")
    sentences: Optional[List[PracticeResultItem]] = Field(None, description="Practiced sentences with results")

    class Config:
        json_schema_extra = {
            "example": {
                "sentenceIds": [5, 5, 7]
            }
        }


class LogPracticeResponse(CamelModel):
    """Number of practice events recorded."""
    logged: int


class RecommendedSentence(CamelModel):
    """Sentence suggested for the next practice session."""
    id: int
    english_text: str
    chinese_text: Optional[str] = None
    difficulty: Optional[str] = None
    audio_url: Optional[str] = None
    category: CategorySummary


class RecommendationsResponse(CamelModel):
    """Sentences suggested for the user."""
    sentences: List[RecommendedSentence]
    total: int
