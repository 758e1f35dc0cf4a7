"""후보 필터 (태그 → decade → 인기도 구간)"""

from typing import Optional, Sequence

from oscarmatch.domains.movies.schemas import MovieRecord
from oscarmatch.domains.smart_match.constants import ANY, DECADE_RANGES
from oscarmatch.domains.smart_match.thresholds import (
    classify_popularity,
    compute_popularity_thresholds,
)
from oscarmatch.domains.smart_match.types import PopularityThresholds


def in_decade(movie: MovieRecord, decade: Optional[str]) -> bool:
    """decade 범위 안인지 ("both"나 알 수 없는 값이면 항상 True)"""
    year_range = DECADE_RANGES.get(decade or "")
    if year_range is None:
        return True
    if movie.oscar_year is None:
        return False
    start, end = year_range
    return start <= movie.oscar_year <= end


def is_scorable(movie: MovieRecord) -> bool:
    """Best Picture 후보이면서 thematic/mood 태그가 모두 채워져 있는지"""
    return (
        movie.is_best_picture_nominee
        and bool(movie.thematic_tags)
        and bool(movie.mood_tags)
    )


def filter_candidates(
    movies: Sequence[MovieRecord],
    decade: Optional[str] = None,
    popularity: Optional[str] = None,
) -> tuple[list[MovieRecord], Optional[PopularityThresholds]]:
    """Smart Match 점수 계산 대상 추리기

    Args:
        movies: 카탈로그 (순서 유지)
        decade: "2000s" | "2010s" | "both"
        popularity: "blockbuster" | "classic" | "hidden-gem" | "any"

    Returns:
        (후보 목록, 사용한 임계값). 인기도 필터를 적용하지 않았으면 임계값은 None.
        후보가 없으면 빈 목록을 반환하며, 이를 오류로 볼지는 호출하는 쪽이 정합니다.
    """
    candidates = [
        m for m in movies if is_scorable(m) and in_decade(m, decade)
    ]

    if not popularity or popularity == ANY:
        return candidates, None

    thresholds = compute_popularity_thresholds(m.vote_count for m in candidates)
    bracketed = [
        m
        for m in candidates
        if classify_popularity(m.vote_count, thresholds) == popularity
    ]
    return bracketed, thresholds
