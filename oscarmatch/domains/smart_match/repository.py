"""Smart Match 캐시 리포지토리 (PostgreSQL CacheStore)"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from oscarmatch.core.logging import get_logger
from oscarmatch.core.utils.datetime import now_utc
from oscarmatch.domains.smart_match.cache import CacheStore
from oscarmatch.domains.smart_match.exceptions import CacheStoreUnavailableError
from oscarmatch.domains.smart_match.models import SmartMatchCache
from oscarmatch.domains.smart_match.types import CacheEntry

logger = get_logger(__name__)


class SmartMatchCacheRepository(CacheStore):
    """smart_match_cache 테이블 접근

    각 작업은 SAVEPOINT 안에서 실행됩니다. 실패하면 그 작업만 롤백되고
    CacheStoreUnavailableError가 발생하며, 같은 세션의 다른 작업은 유지됩니다.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _unavailable(
        self, action: str, error: Exception
    ) -> CacheStoreUnavailableError:
        logger.error(f"smart_match_cache {action} failed: {error}")
        return CacheStoreUnavailableError(f"{action}: {type(error).__name__}")

    async def get(
        self, movie_id: str, preferences_hash: str
    ) -> Optional[CacheEntry]:
        query = select(SmartMatchCache).where(
            SmartMatchCache.movie_id == movie_id,
            SmartMatchCache.preferences_hash == preferences_hash,
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(query)
                row = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("get", e) from e

        if row is None:
            return None
        return CacheEntry(
            movie_id=row.movie_id,
            preferences_hash=row.preferences_hash,
            cached_reason=row.cached_reason,
            match_score=row.match_score,
            created_at=row.created_at,
            last_used=row.last_used,
        )

    async def touch(self, movie_id: str, preferences_hash: str) -> None:
        stmt = (
            update(SmartMatchCache)
            .where(
                SmartMatchCache.movie_id == movie_id,
                SmartMatchCache.preferences_hash == preferences_hash,
            )
            .values(last_used=now_utc())
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("touch", e) from e

    async def put(self, entry: CacheEntry) -> None:
        """INSERT ... ON CONFLICT DO UPDATE (동시 미스는 마지막 쓰기가 이김)"""
        now = now_utc()
        stmt = insert(SmartMatchCache).values(
            movie_id=entry.movie_id,
            preferences_hash=entry.preferences_hash,
            cached_reason=entry.cached_reason,
            match_score=entry.match_score,
            created_at=entry.created_at or now,
            last_used=entry.last_used or now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["movie_id", "preferences_hash"],
            set_={
                "cached_reason": stmt.excluded.cached_reason,
                "match_score": stmt.excluded.match_score,
                "last_used": stmt.excluded.last_used,
            },
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise self._unavailable("put", e) from e
