"""Smart Match 점수 계산

입력(영화, 선호도)만으로 결정되는 순수 함수입니다.
데이터가 없는 항목(태그, 런타임, vote_count 등)은 점수에 기여하지 않습니다.
"""

import math
from typing import Optional

from oscarmatch.domains.movies.schemas import MovieRecord, ThematicTag
from oscarmatch.domains.smart_match import constants as c
from oscarmatch.domains.smart_match.filters import in_decade
from oscarmatch.domains.smart_match.types import (
    ScoreBreakdown,
    UserPreferences,
    WeightProfile,
)

BASE_WEIGHTS = WeightProfile(mood=35, genre=30, runtime=10, bonus=25)
SINGLE_GENRE_WEIGHTS = WeightProfile(mood=25, genre=45, runtime=10, bonus=20)
TWO_GENRE_WEIGHTS = WeightProfile(mood=30, genre=38, runtime=10, bonus=22)


def is_surprise(genres: tuple[str, ...]) -> bool:
    return c.SURPRISE in genres


def weights_for(genres: tuple[str, ...]) -> WeightProfile:
    """선택한 구체 장르 수에 따른 가중치

    장르를 좁힐수록 장르 비중이 커집니다. 런타임 가중치는 항상 같습니다.
    """
    if is_surprise(genres):
        return BASE_WEIGHTS
    if len(genres) == 1:
        return SINGLE_GENRE_WEIGHTS
    if len(genres) == 2:
        return TWO_GENRE_WEIGHTS
    return BASE_WEIGHTS


def _find_tag(movie: MovieRecord, genre: str) -> Optional[ThematicTag]:
    return next((t for t in movie.thematic_tags if t.tag == genre), None)


def mood_score(movie: MovieRecord, prefs: UserPreferences, weight: int) -> float:
    if not movie.mood_tags or not prefs.mood:
        return 0.0
    wanted = c.MOOD_TAGS.get(prefs.mood, prefs.mood)
    return float(weight) if wanted in movie.mood_tags else 0.0


def genre_score(movie: MovieRecord, prefs: UserPreferences, weight: int) -> float:
    """중요도 가중 장르 매칭

    surprise는 태그와 무관하게 만점. 단일 장르의 중요도가 0.8 이상이면
    weight * 1.15로 올려 줍니다.
    """
    if is_surprise(prefs.genres):
        return float(weight)
    if not prefs.genres or not movie.thematic_tags:
        return 0.0

    cap = weight * c.SINGLE_GENRE_BOOST
    matched = 0.0
    for genre in prefs.genres:
        tag = _find_tag(movie, genre)
        if tag is not None:
            matched += tag.importance or c.MISSING_IMPORTANCE

    ratio = min(1.0, matched / len(prefs.genres))
    score = ratio * weight

    if len(prefs.genres) == 1:
        tag = _find_tag(movie, prefs.genres[0])
        if (
            tag is not None
            and tag.importance is not None
            and tag.importance >= c.SINGLE_GENRE_BOOST_MIN_IMPORTANCE
        ):
            score = cap

    return min(score, cap)


def runtime_matches(runtime: int, time: str) -> bool:
    if time == "short":
        return runtime <= c.SHORT_MAX_RUNTIME
    if time == "normal":
        return c.NORMAL_MIN_RUNTIME < runtime <= c.NORMAL_MAX_RUNTIME
    if time == "long":
        return runtime > c.LONG_MIN_RUNTIME
    return time == c.ANY


def runtime_score(movie: MovieRecord, prefs: UserPreferences, weight: int) -> float:
    if not movie.runtime or not prefs.time:
        return 0.0
    return float(weight) if runtime_matches(movie.runtime, prefs.time) else 0.0


def bonus_score(movie: MovieRecord, prefs: UserPreferences, weight: int) -> float:
    bonus = 0
    if movie.is_best_picture_winner:
        bonus += c.WINNER_BONUS
    elif movie.is_best_picture_nominee:
        bonus += c.NOMINEE_BONUS

    if movie.vote_average:
        for min_rating, points in c.RATING_BONUSES:
            if movie.vote_average >= min_rating:
                bonus += points
                break

    if prefs.popularity and prefs.popularity != c.ANY and movie.vote_count:
        bonus += c.POPULARITY_BONUS

    if prefs.decade in c.DECADE_RANGES and in_decade(movie, prefs.decade):
        bonus += c.DECADE_BONUS

    return float(min(bonus, weight))


def score_breakdown(movie: MovieRecord, prefs: UserPreferences) -> ScoreBreakdown:
    weights = weights_for(prefs.genres)
    return ScoreBreakdown(
        weights=weights,
        mood=mood_score(movie, prefs, weights.mood),
        genre=genre_score(movie, prefs, weights.genre),
        runtime=runtime_score(movie, prefs, weights.runtime),
        bonus=bonus_score(movie, prefs, weights.bonus),
    )


def calculate_match_score(movie: MovieRecord, prefs: UserPreferences) -> int:
    """0~98 정수 매칭 점수

    100%는 내지 않도록 98에서 자른 뒤 반올림(0.5는 올림)합니다.
    """
    breakdown = score_breakdown(movie, prefs)
    max_possible = breakdown.weights.total
    raw = breakdown.total / max_possible * 100 if max_possible else 0.0
    return math.floor(min(raw, c.MAX_MATCH_SCORE) + 0.5)
