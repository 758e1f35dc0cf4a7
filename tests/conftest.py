"""테스트 설정 및 공통 fixture

- 순수 로직/서비스 테스트는 인메모리 fake(카탈로그, 캐시, 텍스트 생성기)를 사용
- 리포지토리 테스트는 testcontainers PostgreSQL 사용 (Docker 없으면 skip)
"""

import random
from typing import AsyncGenerator, Optional
from unittest.mock import AsyncMock, patch

import docker
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from oscarmatch.core.config import settings
from oscarmatch.core.database import Base
from oscarmatch.core.llm.types import AllProvidersFailedError
from oscarmatch.core.utils.datetime import now_utc
from oscarmatch.domains.movies.repository import MovieCatalog
from oscarmatch.domains.movies.schemas import MovieDetail, ThematicTag
from oscarmatch.domains.smart_match.cache import CacheStore
from oscarmatch.domains.smart_match.exceptions import CacheStoreUnavailableError
from oscarmatch.domains.smart_match.types import CacheEntry
from oscarmatch.main import app


def is_docker_available() -> bool:
    """Docker 데몬 사용 가능 여부 확인"""
    try:
        client = docker.from_env()
        client.ping()
        return True
    except Exception:
        return False


DOCKER_AVAILABLE = is_docker_available()

requires_docker = pytest.mark.skipif(
    not DOCKER_AVAILABLE, reason="Docker is not available"
)


# =============================================================================
# Fakes
# =============================================================================


class FakeCatalog(MovieCatalog):
    """인메모리 카탈로그 (입력 순서 유지)"""

    def __init__(self, movies: Optional[list[MovieDetail]] = None):
        self.movies = list(movies or [])
        self.saved: list[tuple[str, str, str]] = []
        self.fail_reads: Optional[Exception] = None
        self.fail_writes: Optional[Exception] = None
        self.requested_ranges: list[Optional[tuple[int, int]]] = []

    async def get_nominees(self, oscar_year_range=None):
        if self.fail_reads:
            raise self.fail_reads
        self.requested_ranges.append(oscar_year_range)
        movies = [m for m in self.movies if m.is_best_picture_nominee]
        if oscar_year_range is not None:
            start, end = oscar_year_range
            movies = [
                m
                for m in movies
                if m.oscar_year is not None and start <= m.oscar_year <= end
            ]
        return movies

    async def get_by_id(self, movie_id, nominee_only=False):
        if self.fail_reads:
            raise self.fail_reads
        for m in self.movies:
            if m.id == movie_id and (m.is_best_picture_nominee or not nominee_only):
                return m
        return None

    async def get_random_pool(self, limit=50):
        if self.fail_reads:
            raise self.fail_reads
        nominees = [m for m in self.movies if m.is_best_picture_nominee]
        return random.sample(nominees, min(limit, len(nominees)))

    async def update_generated_text(self, movie_id, field, text):
        if self.fail_writes:
            raise self.fail_writes
        self.saved.append((movie_id, field, text))


class InMemoryCacheStore(CacheStore):
    """dict 기반 캐시 저장소 (작업별 장애 주입 가능)"""

    def __init__(self):
        self.entries: dict[tuple[str, str], CacheEntry] = {}
        self.touched: list[tuple[str, str]] = []
        self.fail_on: set[str] = set()

    def _check(self, action: str) -> None:
        if action in self.fail_on:
            raise CacheStoreUnavailableError(f"{action}: simulated")

    async def get(self, movie_id, preferences_hash):
        self._check("get")
        return self.entries.get((movie_id, preferences_hash))

    async def touch(self, movie_id, preferences_hash):
        self._check("touch")
        self.touched.append((movie_id, preferences_hash))
        entry = self.entries.get((movie_id, preferences_hash))
        if entry is not None:
            entry.last_used = now_utc()

    async def put(self, entry):
        self._check("put")
        self.entries[(entry.movie_id, entry.preferences_hash)] = entry


class FakeTextGenerator:
    """고정 응답(또는 예외)을 돌려주는 TextGenerator"""

    def __init__(self, response="Wygenerowany tekst rekomendacji filmu.", error=None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, messages, *, tier, temperature, max_tokens):
        self.calls.append(
            {
                "messages": messages,
                "tier": tier,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


class FakeReasonGenerator:
    """ReasonSource fake (호출 횟수 기록)"""

    def __init__(self, reason="Świetny wybór na dzisiejszy wieczór."):
        self.reason = reason
        self.calls = 0

    async def generate(self, movie, prefs, match_score):
        self.calls += 1
        return self.reason


# =============================================================================
# Data factories
# =============================================================================


_movie_counter = {"n": 0}


def build_movie(**overrides) -> MovieDetail:
    """점수 계산 가능한 기본 후보 영화 생성"""
    _movie_counter["n"] += 1
    n = _movie_counter["n"]
    data = {
        "id": f"00000000-0000-0000-0000-{n:012d}",
        "title": f"Film {n}",
        "year": 2014,
        "overview": "Opis filmu.",
        "runtime": 130,
        "vote_average": 7.0,
        "vote_count": 50_000,
        "is_best_picture_nominee": True,
        "is_best_picture_winner": False,
        "oscar_year": 2015,
        "mood_tags": ["Głębokie emocje"],
        "thematic_tags": [ThematicTag(tag="Dramat", importance=0.9)],
    }
    data.update(overrides)
    return MovieDetail(**data)


@pytest.fixture
def make_movie():
    return build_movie


@pytest.fixture
def fake_catalog():
    return FakeCatalog()


@pytest.fixture
def cache_store():
    return InMemoryCacheStore()


@pytest.fixture
def text_generator():
    return FakeTextGenerator()


# =============================================================================
# LLM Mock
# =============================================================================


@pytest.fixture(autouse=True)
def block_llm_calls():
    """실제 LLM 호출 차단 (모든 프로바이더 실패로 처리되어 fallback 사용)"""
    with patch(
        "oscarmatch.core.llm.generation.call_with_fallback",
        new=AsyncMock(
            side_effect=AllProvidersFailedError(tier="standard", attempts=[])
        ),
    ) as mock:
        yield mock


# =============================================================================
# API Client
# =============================================================================


@pytest.fixture
def api_key_header() -> dict[str, str]:
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """비동기 HTTP 클라이언트 (서비스 의존성은 각 테스트에서 override)"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# =============================================================================
# Database (testcontainers)
# =============================================================================


@pytest.fixture(scope="session")
def postgres_container():
    """PostgreSQL 테스트 컨테이너 (세션 단위)"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container) -> str:
    """asyncpg 드라이버용 테스트 DB URL"""
    url = postgres_container.get_connection_url()
    return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://").replace(
        "postgresql://", "postgresql+asyncpg://"
    )


@pytest_asyncio.fixture
async def db_session(test_database_url) -> AsyncGenerator[AsyncSession, None]:
    """테스트마다 테이블을 새로 만드는 DB 세션"""
    from oscarmatch.domains.movies import models as _movie_models  # noqa: F401
    from oscarmatch.domains.smart_match import models as _cache_models  # noqa: F401

    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_maker() as session:
        yield session

    await engine.dispose()


def pytest_configure(config):
    """커스텀 마커 등록"""
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "integration: 통합 테스트")
    config.addinivalue_line(
        "markers", "requires_docker: Docker가 필요한 테스트"
    )
