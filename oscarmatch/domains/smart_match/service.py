"""Smart Match 서비스

필터 → 전체 후보 점수 계산 → 상위 N개 → 추천 이유(캐시/생성) 순으로 처리합니다.
"""

from typing import Optional

from oscarmatch.core.config import settings
from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import get_request_id
from oscarmatch.core.utils.time import measure_time
from oscarmatch.domains.movies.repository import MovieCatalog
from oscarmatch.domains.smart_match.cache import CacheStore, ReasonCache
from oscarmatch.domains.smart_match.constants import DECADE_RANGES
from oscarmatch.domains.smart_match.exceptions import NoMatchingMoviesException
from oscarmatch.domains.smart_match.filters import filter_candidates
from oscarmatch.domains.smart_match.ranking import select_top
from oscarmatch.domains.smart_match.reasons import ReasonGenerator
from oscarmatch.domains.smart_match.scoring import calculate_match_score
from oscarmatch.domains.smart_match.types import (
    Recommendation,
    ScoredCandidate,
    SmartMatchResult,
    UserPreferences,
)

logger = get_logger(__name__)


class SmartMatchService:
    """Smart Match 추천 서비스"""

    def __init__(
        self,
        catalog: MovieCatalog,
        cache_store: CacheStore,
        reason_generator: Optional[ReasonGenerator] = None,
        top_n: Optional[int] = None,
    ):
        self.catalog = catalog
        self.reason_cache = ReasonCache(
            store=cache_store,
            generator=reason_generator or ReasonGenerator(),
        )
        self.top_n = top_n or settings.smart_match_top_n

    async def recommend(self, prefs: UserPreferences) -> SmartMatchResult:
        """선호도에 맞는 상위 N개 추천

        Raises:
            CatalogUnavailableException: 카탈로그 조회 실패 (503)
            NoMatchingMoviesException: 필터 후 후보가 없음 (404)
        """
        request_id = get_request_id()

        movies = await self.catalog.get_nominees(
            DECADE_RANGES.get(prefs.decade or "")
        )
        candidates, thresholds = filter_candidates(
            movies, decade=prefs.decade, popularity=prefs.popularity
        )
        if thresholds is not None:
            logger.info(
                f"Popularity thresholds: high={thresholds.high}, "
                f"low={thresholds.low}",
                extra={"request_id": request_id},
            )

        if not candidates:
            logger.info(
                f"No candidates (decade={prefs.decade}, "
                f"popularity={prefs.popularity})",
                extra={"request_id": request_id},
            )
            raise NoMatchingMoviesException(
                decade=prefs.decade, popularity=prefs.popularity
            )

        logger.info(
            f"Smart Match: scoring {len(candidates)} movies "
            f"(decade={prefs.decade or 'all'}, "
            f"popularity={prefs.popularity or 'any'})",
            extra={"request_id": request_id},
        )
        scored = [
            ScoredCandidate(movie=m, match_score=calculate_match_score(m, prefs))
            for m in candidates
        ]
        top = select_top(scored, self.top_n)

        # 같은 AsyncSession을 공유하므로 순차 처리
        recommendations = []
        with measure_time() as timer:
            for candidate in top:
                reason = await self.reason_cache.resolve(
                    candidate.movie, prefs, candidate.match_score
                )
                recommendations.append(
                    Recommendation(
                        movie=candidate.movie,
                        match_score=candidate.match_score,
                        reason=reason,
                        rank=candidate.rank or len(recommendations) + 1,
                    )
                )

        logger.info(
            f"Smart Match complete: {len(recommendations)} recommendations, "
            f"reasons in {timer['elapsed_ms']:.0f}ms",
            extra={"request_id": request_id},
        )
        return SmartMatchResult(
            recommendations=recommendations, total_analyzed=len(candidates)
        )
