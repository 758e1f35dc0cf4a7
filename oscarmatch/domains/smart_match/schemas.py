"""Smart Match 요청/응답 스키마"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from oscarmatch.domains.movies.schemas import MovieRecord
from oscarmatch.domains.smart_match.constants import MAX_GENRES, SURPRISE
from oscarmatch.domains.smart_match.types import SmartMatchResult, UserPreferences


class SmartMatchRequest(BaseModel):
    """퀴즈 응답

    enum 성격의 필드는 자유 문자열입니다. 알 수 없는 값은 점수 기여 0으로 처리됩니다.
    """

    mood: Optional[str] = Field(default=None, description="inspiration, adrenaline, ...")
    time: Optional[str] = Field(default=None, description="short | normal | long | any")
    genres: list[str] = Field(
        default_factory=list,
        max_length=MAX_GENRES,
        description='최대 3개 장르 또는 ["surprise"]',
    )
    decade: Optional[str] = Field(default=None, description="2000s | 2010s | both")
    popularity: Optional[str] = Field(
        default=None, description="blockbuster | classic | hidden-gem | any"
    )

    @field_validator("genres")
    @classmethod
    def normalize_surprise(cls, v: list[str]) -> list[str]:
        # surprise와 구체 장르는 함께 선택할 수 없음
        if SURPRISE in v:
            return [SURPRISE]
        return v

    def to_preferences(self) -> UserPreferences:
        return UserPreferences(
            mood=self.mood,
            time=self.time,
            genres=tuple(self.genres),
            decade=self.decade,
            popularity=self.popularity,
        )


class MovieRecommendationResponse(BaseModel):
    movie: MovieRecord
    match_score: int = Field(..., ge=0, le=98)
    reason: str
    rank: int = Field(..., ge=1)


class SmartMatchResponse(BaseModel):
    recommendations: list[MovieRecommendationResponse] = Field(default_factory=list)
    total_analyzed: int = 0

    @classmethod
    def from_result(cls, result: SmartMatchResult) -> "SmartMatchResponse":
        return cls(
            recommendations=[
                MovieRecommendationResponse(
                    movie=r.movie,
                    match_score=r.match_score,
                    reason=r.reason,
                    rank=r.rank,
                )
                for r in result.recommendations
            ],
            total_analyzed=result.total_analyzed,
        )
