"""인기도 임계값 계산

vote_count 분포는 요청마다 (decade 필터가 적용된) 현재 후보 풀에서 다시 계산합니다.
"""

import math
from typing import Iterable, Optional

from oscarmatch.domains.smart_match.constants import (
    BLOCKBUSTER,
    CLASSIC,
    DEFAULT_HIGH_THRESHOLD,
    DEFAULT_LOW_THRESHOLD,
    HIDDEN_GEM,
    HIGH_PERCENTILE,
    LOW_PERCENTILE,
)
from oscarmatch.domains.smart_match.types import PopularityThresholds


def compute_popularity_thresholds(
    vote_counts: Iterable[Optional[int]],
) -> PopularityThresholds:
    """vote_count 목록에서 blockbuster/hidden-gem 경계값 계산

    None과 0은 제외하고 내림차순 정렬한 뒤
    high = counts[floor(N * 0.25)], low = counts[floor(N * 0.75)].

    Example:
        >>> compute_popularity_thresholds([5000, 8000, 15000, 50000, 120000, 200000])
        PopularityThresholds(high=120000, low=8000)
    """
    counts = sorted((c for c in vote_counts if c), reverse=True)
    if not counts:
        return PopularityThresholds(
            high=DEFAULT_HIGH_THRESHOLD, low=DEFAULT_LOW_THRESHOLD
        )

    n = len(counts)
    return PopularityThresholds(
        high=counts[math.floor(n * HIGH_PERCENTILE)],
        low=counts[math.floor(n * LOW_PERCENTILE)],
    )


def classify_popularity(
    vote_count: Optional[int], thresholds: PopularityThresholds
) -> Optional[str]:
    """vote_count가 속하는 구간 (정보가 없으면 None)"""
    if vote_count is None:
        return None
    if vote_count >= thresholds.high:
        return BLOCKBUSTER
    if vote_count >= thresholds.low:
        return CLASSIC
    return HIDDEN_GEM
