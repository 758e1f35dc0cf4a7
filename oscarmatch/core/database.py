from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from oscarmatch.core.config import settings

# 비동기 엔진 생성 (연결은 첫 쿼리 시점에 맺어짐)
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 데이터베이스 세션 의존성

    요청이 정상 종료되면 커밋하고, 예외가 발생하면 롤백합니다.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """테이블 생성 (개발용, auto_create_tables=True 일 때만 호출)"""
    # 모델이 Base.metadata에 등록되도록 import
    from oscarmatch.domains.movies import models as _movie_models  # noqa: F401
    from oscarmatch.domains.smart_match import models as _cache_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
