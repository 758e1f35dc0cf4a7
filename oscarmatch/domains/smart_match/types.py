"""Smart Match 내부 타입"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from oscarmatch.domains.movies.schemas import MovieRecord


@dataclass(frozen=True)
class UserPreferences:
    """퀴즈 5문항 응답

    알 수 없는 값은 그대로 두고, 점수 계산에서 기여도 0으로 처리합니다.
    """

    mood: Optional[str] = None
    time: Optional[str] = None
    genres: tuple[str, ...] = ()
    decade: Optional[str] = None
    popularity: Optional[str] = None


@dataclass(frozen=True)
class WeightProfile:
    mood: int
    genre: int
    runtime: int
    bonus: int

    @property
    def total(self) -> int:
        return self.mood + self.genre + self.runtime + self.bonus


@dataclass(frozen=True)
class ScoreBreakdown:
    """항목별 점수 (디버깅/테스트용)"""

    weights: WeightProfile
    mood: float = 0.0
    genre: float = 0.0
    runtime: float = 0.0
    bonus: float = 0.0

    @property
    def total(self) -> float:
        return self.mood + self.genre + self.runtime + self.bonus


@dataclass(frozen=True)
class PopularityThresholds:
    high: int
    low: int


@dataclass
class ScoredCandidate:
    movie: MovieRecord
    match_score: int
    rank: Optional[int] = None


@dataclass
class CacheEntry:
    movie_id: str
    preferences_hash: str
    cached_reason: str
    match_score: int
    created_at: Optional[datetime] = None
    last_used: Optional[datetime] = None


@dataclass
class Recommendation:
    movie: MovieRecord
    match_score: int
    reason: str
    rank: int


@dataclass
class SmartMatchResult:
    recommendations: list[Recommendation] = field(default_factory=list)
    total_analyzed: int = 0
