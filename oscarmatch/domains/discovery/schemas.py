"""Discovery 요청/응답 스키마"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from oscarmatch.domains.movies.schemas import MovieRecord, ThematicTag
from oscarmatch.domains.smart_match.schemas import SmartMatchRequest


class QuickShotRequest(BaseModel):
    movie_id: Optional[str] = Field(
        default=None, description="지정하지 않으면 무작위 후보"
    )


class QuickShotResponse(BaseModel):
    movie: MovieRecord
    recommendation: str


class BriefResponse(BaseModel):
    movie: MovieRecord
    brief: str


class ExplanationRequest(BaseModel):
    preferences: Optional[SmartMatchRequest] = None


class ExplanationResponse(BaseModel):
    movie: MovieRecord
    explanation: str


class ToWatchMovie(BaseModel):
    title: str
    thematic_tags: list[ThematicTag] = Field(default_factory=list)
    mood_tags: list[str] = Field(default_factory=list)
    vote_average: Optional[float] = None


class ProgressInsightRequest(BaseModel):
    category_type: Literal["decade", "year"]
    category_identifier: str = Field(..., min_length=1)
    watched_count: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)
    to_watch_movies: list[ToWatchMovie] = Field(default_factory=list)


class ProgressInsightResponse(BaseModel):
    insight: str
