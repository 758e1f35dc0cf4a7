"""Movies 도메인 리포지토리

카탈로그 조회는 ``MovieCatalog`` 인터페이스로 추상화되어 있어
Smart Match 파이프라인을 DB 없이 테스트할 수 있습니다.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Literal, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from oscarmatch.core.logging import get_logger
from oscarmatch.domains.movies.exceptions import CatalogUnavailableException
from oscarmatch.domains.movies.models import Movie
from oscarmatch.domains.movies.schemas import MovieDetail, MovieRecord

logger = get_logger(__name__)

GeneratedTextField = Literal["ai_recommendation_text", "ai_brief_text"]


class MovieCatalog(ABC):
    """읽기 전용 카탈로그 (+ 생성 텍스트 저장)"""

    @abstractmethod
    async def get_nominees(
        self, oscar_year_range: Optional[tuple[int, int]] = None
    ) -> list[MovieRecord]:
        """Best Picture 후보 전체 (선택적으로 시상식 연도 범위 제한)"""

    @abstractmethod
    async def get_by_id(
        self, movie_id: str, nominee_only: bool = False
    ) -> Optional[MovieDetail]:
        """ID로 단일 영화 조회"""

    @abstractmethod
    async def get_random_pool(self, limit: int = 50) -> list[MovieDetail]:
        """무작위 추천용 후보 풀"""

    @abstractmethod
    async def update_generated_text(
        self, movie_id: str, field: GeneratedTextField, text: str
    ) -> None:
        """생성된 AI 텍스트를 영화 레코드에 저장"""


class MovieRepository(MovieCatalog):
    """PostgreSQL 카탈로그

    모든 DB 오류는 CatalogUnavailableException(503)으로 변환됩니다.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_nominees(
        self, oscar_year_range: Optional[tuple[int, int]] = None
    ) -> list[MovieRecord]:
        """Best Picture 후보 조회

        Args:
            oscar_year_range: (시작, 끝) 시상식 연도, 양 끝 포함

        Returns:
            MovieRecord 목록 (oscar_year, title 순)

        Raises:
            CatalogUnavailableException: 조회 실패
        """
        query = select(Movie).where(Movie.is_best_picture_nominee.is_(True))
        if oscar_year_range is not None:
            start, end = oscar_year_range
            query = query.where(Movie.oscar_year.between(start, end))
        query = query.order_by(Movie.oscar_year, Movie.title)

        try:
            result = await self.session.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Catalog query failed: {e}")
            raise CatalogUnavailableException(reason=type(e).__name__) from e

        return [MovieRecord.model_validate(m) for m in result.scalars().all()]

    async def get_by_id(
        self, movie_id: str, nominee_only: bool = False
    ) -> Optional[MovieDetail]:
        # UUID 형식이 아니면 없는 영화
        try:
            uuid.UUID(movie_id)
        except ValueError:
            return None

        query = select(Movie).where(Movie.id == movie_id)
        if nominee_only:
            query = query.where(Movie.is_best_picture_nominee.is_(True))

        try:
            result = await self.session.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Catalog lookup failed for movie_id={movie_id}: {e}")
            raise CatalogUnavailableException(reason=type(e).__name__) from e

        movie = result.scalar_one_or_none()
        return MovieDetail.model_validate(movie) if movie else None

    async def get_random_pool(self, limit: int = 50) -> list[MovieDetail]:
        """전체 후보 중 무작위 ``limit``개 (최종 선택은 호출하는 쪽에서)"""
        query = (
            select(Movie)
            .where(Movie.is_best_picture_nominee.is_(True))
            .order_by(func.random())
            .limit(limit)
        )
        try:
            result = await self.session.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Catalog pool query failed: {e}")
            raise CatalogUnavailableException(reason=type(e).__name__) from e

        return [MovieDetail.model_validate(m) for m in result.scalars().all()]

    async def update_generated_text(
        self, movie_id: str, field: GeneratedTextField, text: str
    ) -> None:
        stmt = (
            update(Movie)
            .where(Movie.id == movie_id)
            .values({field: text, "updated_at": func.now()})
        )
        # 저장 실패가 같은 세션의 다른 작업을 깨뜨리지 않도록 SAVEPOINT 사용
        async with self.session.begin_nested():
            await self.session.execute(stmt)
