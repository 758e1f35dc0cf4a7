"""추천 이유 캐시

키는 (movie_id, 정규화된 선호도 해시)입니다. 사용자 식별 정보는 들어가지 않으므로
같은 선택을 한 사용자들은 같은 캐시 항목을 공유합니다.
"""

import hashlib
import json
from abc import ABC, abstractmethod
from typing import Optional, Protocol

from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import get_request_id
from oscarmatch.core.utils.datetime import now_utc
from oscarmatch.domains.movies.schemas import MovieRecord
from oscarmatch.domains.smart_match.constants import ALL_DECADES, ANY
from oscarmatch.domains.smart_match.exceptions import CacheStoreUnavailableError
from oscarmatch.domains.smart_match.types import CacheEntry, UserPreferences

logger = get_logger(__name__)


def normalize_preferences(prefs: UserPreferences) -> dict[str, str]:
    """캐시 키용 정규화 (장르는 정렬 후 콤마로 연결)"""
    return {
        "mood": prefs.mood or "",
        "time": prefs.time or "",
        "genres": ",".join(sorted(prefs.genres)),
        "decade": prefs.decade or ALL_DECADES,
        "popularity": prefs.popularity or ANY,
    }


def build_preferences_hash(prefs: UserPreferences) -> str:
    """정규화된 선호도의 SHA-256 hex digest"""
    payload = json.dumps(
        normalize_preferences(prefs),
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CacheStore(ABC):
    """캐시 저장소 인터페이스

    구현체는 저장소 장애 시 CacheStoreUnavailableError를 발생시켜야 합니다.
    """

    @abstractmethod
    async def get(
        self, movie_id: str, preferences_hash: str
    ) -> Optional[CacheEntry]: ...

    @abstractmethod
    async def touch(self, movie_id: str, preferences_hash: str) -> None:
        """last_used 갱신"""

    @abstractmethod
    async def put(self, entry: CacheEntry) -> None:
        """(movie_id, preferences_hash) 기준 upsert, 마지막 쓰기가 이김"""


class ReasonSource(Protocol):
    async def generate(
        self, movie: MovieRecord, prefs: UserPreferences, match_score: int
    ) -> str: ...


class ReasonCache:
    """캐시 조회 → 미스 시 생성 후 저장

    저장소 장애는 요청을 막지 않습니다. 조회가 실패하면 바로 생성하고,
    저장이 실패하면 생성한 이유를 그대로 돌려줍니다.
    """

    def __init__(self, store: CacheStore, generator: ReasonSource):
        self.store = store
        self.generator = generator

    async def get(
        self, movie: MovieRecord, prefs: UserPreferences
    ) -> Optional[str]:
        """캐시된 이유 (없으면 None). 히트 시 last_used를 갱신합니다.

        Raises:
            CacheStoreUnavailableError: 조회 자체가 실패한 경우
        """
        preferences_hash = build_preferences_hash(prefs)
        entry = await self.store.get(movie.id, preferences_hash)
        if entry is None:
            return None

        try:
            await self.store.touch(movie.id, preferences_hash)
        except CacheStoreUnavailableError as e:
            logger.warning(
                f"Failed to refresh last_used for movie_id={movie.id}: {e}",
                extra={"request_id": get_request_id()},
            )
        return entry.cached_reason

    async def put(
        self,
        movie: MovieRecord,
        prefs: UserPreferences,
        reason: str,
        match_score: int,
    ) -> None:
        now = now_utc()
        await self.store.put(
            CacheEntry(
                movie_id=movie.id,
                preferences_hash=build_preferences_hash(prefs),
                cached_reason=reason,
                match_score=match_score,
                created_at=now,
                last_used=now,
            )
        )

    async def resolve(
        self, movie: MovieRecord, prefs: UserPreferences, match_score: int
    ) -> str:
        """캐시된 이유를 돌려주거나 새로 생성해서 캐시에 넣고 돌려줌"""
        request_id = get_request_id()
        try:
            cached = await self.get(movie, prefs)
        except CacheStoreUnavailableError as e:
            logger.warning(
                f"Reason cache unavailable, generating directly "
                f"for '{movie.title}': {e}",
                extra={"request_id": request_id},
            )
            return await self.generator.generate(movie, prefs, match_score)

        if cached is not None:
            logger.info(
                f"Cache HIT for '{movie.title}'",
                extra={"request_id": request_id},
            )
            return cached

        logger.info(
            f"Cache MISS for '{movie.title}', generating reason",
            extra={"request_id": request_id},
        )
        reason = await self.generator.generate(movie, prefs, match_score)

        try:
            await self.put(movie, prefs, reason, match_score)
        except CacheStoreUnavailableError as e:
            logger.warning(
                f"Failed to cache reason for '{movie.title}': {e}",
                extra={"request_id": request_id},
            )
        return reason
