"""Discovery 서비스

각 텍스트는 GenerationTask로 만들어지며 LLM이 실패해도 템플릿 문구를 돌려줍니다.
빠른 추천 문구와 브리프는 영화 레코드에 저장해 두고 재사용합니다.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from oscarmatch.core.llm import GenerationTask, LLMMessage, LLMTier, TextGenerator
from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import get_request_id
from oscarmatch.domains.discovery import prompts
from oscarmatch.domains.discovery.schemas import (
    ProgressInsightRequest,
    ToWatchMovie,
)
from oscarmatch.domains.movies.exceptions import MovieNotFoundException
from oscarmatch.domains.movies.repository import GeneratedTextField, MovieCatalog
from oscarmatch.domains.movies.schemas import MovieDetail
from oscarmatch.domains.smart_match.reasons import (
    build_user_choices_context,
    format_number,
)
from oscarmatch.domains.smart_match.types import UserPreferences

logger = get_logger(__name__)

QUICK_SHOT_POOL_SIZE = 50


def _oscar_phrase(movie: MovieDetail) -> str:
    return "nagrodzony Oscarem" if movie.is_best_picture_winner else "nominowany do Oscara"


def _genres(movie: MovieDetail, default: str) -> str:
    return ", ".join(t.tag for t in movie.thematic_tags) or default


def _status(movie: MovieDetail) -> str:
    return "Zwycięzca" if movie.is_best_picture_winner else "Nominowany"


class ExpectationTask(GenerationTask[MovieDetail]):
    """빠른 추천: 영화에서 무엇을 기대할 수 있는지 (스포일러 없음)"""

    name = "quick_shot"
    tier = LLMTier.LIGHT
    temperature = 0.8
    max_tokens = 200

    def build_messages(self, movie: MovieDetail) -> list[LLMMessage]:
        content = prompts.EXPECTATION_PROMPT.format(
            title=movie.title,
            year=movie.year,
            genres=_genres(movie, "Nieznane"),
            overview=movie.overview or "Brak opisu",
            status=_status(movie),
            oscar_year=movie.oscar_year,
            rating=format_number(movie.vote_average),
        )
        return [LLMMessage(role="user", content=content)]

    def fallback(self, movie: MovieDetail) -> str:
        return (
            f"Ten {_oscar_phrase(movie)} film z {movie.year} roku oferuje "
            "niezapomniane doświadczenie kinowe pełne emocji "
            "i mistrzowskiego rzemiosła filmowego."
        )


class BriefTask(GenerationTask[MovieDetail]):
    """관람 전 5분 브리프"""

    name = "brief"
    tier = LLMTier.STANDARD
    temperature = 0.7
    max_tokens = 600

    def build_messages(self, movie: MovieDetail) -> list[LLMMessage]:
        status = (
            "Zwycięzca Najlepszy Film"
            if movie.is_best_picture_winner
            else "Nominowany Najlepszy Film"
        )
        content = prompts.BRIEF_PROMPT.format(
            title=movie.title,
            original_title=movie.original_title or movie.title,
            year=movie.year,
            genres=_genres(movie, "Drama"),
            overview=movie.overview or "Brak opisu",
            status=status,
            oscar_year=movie.oscar_year,
            rating=format_number(movie.vote_average) if movie.vote_average else "N/A",
            runtime=movie.runtime or "ok. 120",
        )
        return [
            LLMMessage(role="system", content=prompts.BRIEF_SYSTEM_PROMPT),
            LLMMessage(role="user", content=content),
        ]

    def fallback(self, movie: MovieDetail) -> str:
        overview = movie.overview or "Klasyczny film oscarowy, który warto obejrzeć."
        return f'"{movie.title}" ({movie.year}) - {overview}'


@dataclass
class ExplanationContext:
    movie: MovieDetail
    prefs: Optional[UserPreferences] = None


class ExplanationTask(GenerationTask[ExplanationContext]):
    """AI가 이 영화를 고른 이유 (4~5개 항목, 캐시하지 않음)"""

    name = "explanation"
    tier = LLMTier.LIGHT
    temperature = 0.5
    max_tokens = 300

    def build_messages(self, context: ExplanationContext) -> list[LLMMessage]:
        movie = context.movie
        user_choices = ""
        if context.prefs is not None:
            choices = build_user_choices_context(context.prefs)
            if choices:
                user_choices = f"\nWybory użytkownika:\n{choices}\n"
        content = prompts.EXPLANATION_PROMPT.format(
            title=movie.title,
            year=movie.year,
            genres=_genres(movie, "Nieznane"),
            status=_status(movie),
            oscar_year=movie.oscar_year,
            rating=format_number(movie.vote_average),
            runtime=movie.runtime,
            user_choices=user_choices,
        )
        return [LLMMessage(role="user", content=content)]

    def fallback(self, context: ExplanationContext) -> str:
        movie = context.movie
        role = "zwycięzcy" if movie.is_best_picture_winner else "nominowanego"
        return (
            f'AI wybrało "{movie.title}" na podstawie jego statusu jako {role} '
            f"Oscara oraz wysokiej oceny {format_number(movie.vote_average)}/10."
        )


def category_name(category_type: str, identifier: str) -> str:
    if category_type == "decade":
        return prompts.CATEGORY_NAMES.get(identifier, identifier)
    return f"rok {identifier}"


def progress_percentage(watched: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(watched / total * 100 + 0.5)


def _describe_to_watch(movie: ToWatchMovie) -> str:
    genres = ", ".join(t.tag for t in movie.thematic_tags) or "Dramat"
    moods = ", ".join(movie.mood_tags) or "Inspiracja"
    rating = (
        f"{format_number(movie.vote_average)}/10"
        if movie.vote_average
        else "brak oceny"
    )
    return f'"{movie.title}" ({genres}, nastrój: {moods}, ocena: {rating})'


def build_progress_fallback(req: ProgressInsightRequest) -> str:
    """진행률 구간별 템플릿 (완료 / 75% 이상 / 50% 이상 / 그 외)"""
    category = category_name(req.category_type, req.category_identifier)
    remaining = req.total_count - req.watched_count
    percentage = progress_percentage(req.watched_count, req.total_count)

    if remaining <= 0:
        return (
            f"Gratulacje! Ukończyłeś wszystkie filmy z kategorii {category}. "
            "To wspaniałe osiągnięcie w Twojej oscarowej podróży!"
        )
    if percentage >= 75:
        suggestion = (
            req.to_watch_movies[0].title if req.to_watch_movies else "pozostałe filmy"
        )
        return (
            f"Świetnie! Masz już {percentage}% filmów z kategorii {category} "
            f"za sobą. Zostało tylko {remaining} filmów do ukończenia. "
            f'Polecam zacząć od "{suggestion}".'
        )
    if percentage >= 50:
        return (
            f"Dobra robota! Jesteś w połowie drogi przez {category} "
            f"({percentage}%). Kontynuuj swoją podróż - zostało {remaining} "
            "filmów do obejrzenia."
        )
    return (
        f"Rozpocząłeś swoją podróż przez {category} ({percentage}% ukończone). "
        f"Przed Tobą {remaining} wspaniałych filmów oscarowych do odkrycia!"
    )


class ProgressInsightTask(GenerationTask[ProgressInsightRequest]):
    """진행 상황 동기부여 인사이트"""

    name = "progress_insight"
    tier = LLMTier.STANDARD
    temperature = 0.8
    max_tokens = 200

    def build_messages(self, req: ProgressInsightRequest) -> list[LLMMessage]:
        movies = "\n".join(_describe_to_watch(m) for m in req.to_watch_movies[:5])
        content = prompts.INSIGHT_PROMPT.format(
            category=category_name(req.category_type, req.category_identifier),
            watched=req.watched_count,
            total=req.total_count,
            percentage=progress_percentage(req.watched_count, req.total_count),
            remaining=req.total_count - req.watched_count,
            movies=movies or "Brak szczegółów o filmach",
        )
        return [
            LLMMessage(role="system", content=prompts.INSIGHT_SYSTEM_PROMPT),
            LLMMessage(role="user", content=content),
        ]

    def fallback(self, req: ProgressInsightRequest) -> str:
        return build_progress_fallback(req)


class DiscoveryService:
    """Discovery 서비스"""

    def __init__(
        self,
        catalog: MovieCatalog,
        text_generator: Optional[TextGenerator] = None,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.expectation = ExpectationTask(text_generator)
        self.brief_task = BriefTask(text_generator)
        self.explanation_task = ExplanationTask(text_generator)
        self.insight_task = ProgressInsightTask(text_generator)
        self.rng = rng or random.Random()

    async def _persist(
        self, movie: MovieDetail, field: GeneratedTextField, text: str
    ) -> None:
        try:
            await self.catalog.update_generated_text(movie.id, field, text)
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Failed to save {field} for '{movie.title}': {e}",
                extra={"request_id": get_request_id()},
            )
            return
        logger.info(
            f"Saved {field} for '{movie.title}'",
            extra={"request_id": get_request_id()},
        )

    async def quick_shot(
        self, movie_id: Optional[str] = None
    ) -> tuple[MovieDetail, str]:
        """지정한 후보 (없으면 무작위 후보 풀에서 하나)와 기대 포인트 문구

        Raises:
            MovieNotFoundException: 후보가 하나도 없는 경우
        """
        movie = None
        if movie_id:
            movie = await self.catalog.get_by_id(movie_id, nominee_only=True)
            if movie is None:
                logger.info(
                    f"Quick shot movie_id={movie_id} not found, picking random",
                    extra={"request_id": get_request_id()},
                )

        if movie is None:
            pool = await self.catalog.get_random_pool(QUICK_SHOT_POOL_SIZE)
            if not pool:
                raise MovieNotFoundException()
            movie = self.rng.choice(pool)

        text = movie.ai_recommendation_text
        if not text:
            text = await self.expectation.run(movie)
            await self._persist(movie, "ai_recommendation_text", text)
        return movie, text

    async def brief(self, movie_id: str) -> tuple[MovieDetail, str]:
        movie = await self.catalog.get_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundException(movie_id)

        text = movie.ai_brief_text
        if not text:
            logger.info(
                f"Generating brief for '{movie.title}' ({movie.id})",
                extra={"request_id": get_request_id()},
            )
            text = await self.brief_task.run(movie)
            await self._persist(movie, "ai_brief_text", text)
        return movie, text

    async def explanation(
        self, movie_id: str, prefs: Optional[UserPreferences] = None
    ) -> tuple[MovieDetail, str]:
        movie = await self.catalog.get_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundException(movie_id)
        text = await self.explanation_task.run(ExplanationContext(movie, prefs))
        return movie, text

    async def progress_insight(self, req: ProgressInsightRequest) -> str:
        return await self.insight_task.run(req)
