"""Smart Match 추천 이유 생성

LLM으로 1~2문장 이유를 만들고, 실패하거나 응답이 10자 이하이면
``build_fallback_reason`` 템플릿을 사용합니다. 호출자에게 예외를 던지지 않습니다.
"""

from dataclasses import dataclass
from typing import Optional

from oscarmatch.core.llm import GenerationTask, LLMMessage, LLMTier
from oscarmatch.core.llm.observability import get_observe_decorator
from oscarmatch.domains.movies.schemas import MovieRecord
from oscarmatch.domains.smart_match import prompts
from oscarmatch.domains.smart_match.constants import DECADE_RANGES
from oscarmatch.domains.smart_match.scoring import is_surprise
from oscarmatch.domains.smart_match.types import UserPreferences

observe = get_observe_decorator()

HIGH_RATING = 8.0


def format_number(value: Optional[float]) -> str:
    """8.0 → "8", 8.25 → "8.25" """
    if value is None:
        return "brak"
    return f"{value:g}"


def _oscar_phrase(movie: MovieRecord) -> str:
    return "nagrodzony Oscarem" if movie.is_best_picture_winner else "nominowany do Oscara"


def _sentence(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def build_user_choices_context(prefs: UserPreferences) -> str:
    lines = []
    if prefs.mood:
        mood = prompts.MOOD_DESCRIPTIONS.get(prefs.mood, prefs.mood)
        lines.append(f"- Nastrój: szuka {mood}")

    if prefs.genres:
        if is_surprise(prefs.genres):
            lines.append('- Gatunki: "Zaskocz mnie" - brak preferencji gatunkowych')
        else:
            lines.append(
                f"- Gatunki: {', '.join(prefs.genres)} (wybrane przez użytkownika)"
            )

    if prefs.decade:
        decade = prompts.DECADE_DESCRIPTIONS.get(prefs.decade, prefs.decade)
        lines.append(f"- Dekada: wybiera filmy z {decade}")

    if prefs.popularity:
        popularity = prompts.POPULARITY_DESCRIPTIONS.get(
            prefs.popularity, prefs.popularity
        )
        lines.append(f"- Popularność: preferuje {popularity}")

    if prefs.time:
        time = prompts.TIME_DESCRIPTIONS.get(prefs.time, prefs.time)
        lines.append(f"- Czas: ma ochotę na {time}")

    return "\n".join(lines)


def popularity_label(vote_count: int) -> str:
    if vote_count > prompts.VERY_HIGH_VOTES:
        return "bardzo wysoka"
    if vote_count < prompts.LOW_VOTES:
        return "niska"
    return "średnia"


def decade_of(oscar_year: Optional[int]) -> str:
    for decade, (start, end) in DECADE_RANGES.items():
        if oscar_year is not None and start <= oscar_year <= end:
            return decade
    return "unknown"


def build_movie_context(movie: MovieRecord) -> str:
    lines = [f"- Tytuł: {movie.title} ({movie.year})"]

    if movie.thematic_tags:
        tags = sorted(
            movie.thematic_tags, key=lambda t: t.importance or 0, reverse=True
        )
        genres = ", ".join(
            f"{t.tag} (ważność: {format_number(t.importance)})" for t in tags
        )
        lines.append(f"- Gatunki: {genres}")

    if movie.mood_tags:
        lines.append(f"- Nastrój: {', '.join(movie.mood_tags)}")

    if movie.runtime:
        hours, minutes = divmod(movie.runtime, 60)
        lines.append(f"- Czas trwania: {hours} godzin i {minutes} minut")

    if movie.vote_average:
        lines.append(f"- Ocena TMDB: {format_number(movie.vote_average)}/10")

    if movie.vote_count:
        lines.append(
            f"- Popularność: {popularity_label(movie.vote_count)} "
            f"({movie.vote_count:,} głosów)"
        )

    if movie.oscar_year:
        lines.append(
            f"- Dekada: {decade_of(movie.oscar_year)} "
            f"(ceremonia {movie.oscar_year})"
        )

    status = "Zwycięzca" if movie.is_best_picture_winner else "Nominowany"
    lines.append(f"- Status Oscar: {status} ({movie.oscar_year})")
    return "\n".join(lines)


def build_fallback_reason(movie: MovieRecord, prefs: UserPreferences) -> str:
    """네트워크 없이 만드는 1문장 이유

    1) 구체 장르를 골랐고 영화에 일치하는 태그가 있으면 가장 중요도 높은 태그를 언급
       (평점 8.0 이상이면 평점도 함께)
    2) 그 외에는 Oscar 상태, decade, 평점, 인기도 문구로 일반 문장
    """
    suffix = prompts.POPULARITY_SUFFIXES.get(prefs.popularity or "", "")
    decade = prompts.DECADE_PHRASES.get(prefs.decade or "", "")
    high_rating = bool(movie.vote_average and movie.vote_average >= HIGH_RATING)
    rating = format_number(movie.vote_average)

    if prefs.genres and not is_surprise(prefs.genres):
        matching = sorted(
            (t for t in movie.thematic_tags if t.tag in prefs.genres),
            key=lambda t: t.importance or 0,
            reverse=True,
        )
        if matching:
            genre = matching[0].tag.lower()
            if high_rating:
                return (
                    _sentence("Świetny przykład kina", genre, decade)
                    + f" z wysoką oceną widzów – aż {rating}/10{suffix}."
                )
            return _sentence("Ten film to dobry przykład kina", genre, decade) + f"{suffix}."

    opening = _sentence("Ten", _oscar_phrase(movie), "film", decade)
    if high_rating:
        return f"{opening} ma wysoką ocenę {rating}/10{suffix}."
    return f"{opening} doskonale pasuje do Twoich preferencji{suffix}."


@dataclass
class ReasonContext:
    movie: MovieRecord
    prefs: UserPreferences
    match_score: int


class ReasonGenerator(GenerationTask[ReasonContext]):
    """Smart Match 추천 이유 생성기 (standard 티어, 100 토큰)"""

    name = "smart_match_reason"
    tier = LLMTier.STANDARD
    temperature = 0.7
    max_tokens = 100
    min_length = 10

    def build_messages(self, context: ReasonContext) -> list[LLMMessage]:
        user_prompt = prompts.USER_PROMPT_TEMPLATE.format(
            title=context.movie.title,
            user_choices=build_user_choices_context(context.prefs),
            movie_context=build_movie_context(context.movie),
        )
        return [
            LLMMessage(role="system", content=prompts.SYSTEM_PROMPT),
            LLMMessage(role="user", content=user_prompt),
        ]

    def fallback(self, context: ReasonContext) -> str:
        return build_fallback_reason(context.movie, context.prefs)

    @observe(name="smart_match_reason")
    async def generate(
        self, movie: MovieRecord, prefs: UserPreferences, match_score: int
    ) -> str:
        return await self.run(ReasonContext(movie, prefs, match_score))
