"""상위 N개 선택"""

from typing import Sequence

from oscarmatch.domains.smart_match.types import ScoredCandidate


def select_top(scored: Sequence[ScoredCandidate], n: int = 3) -> list[ScoredCandidate]:
    """점수 내림차순 상위 n개에 1부터 rank 부여

    동점이면 입력 순서를 유지합니다 (sorted는 stable).
    후보가 n개보다 적으면 있는 만큼만 돌려줍니다.
    """
    ordered = sorted(scored, key=lambda s: s.match_score, reverse=True)[:n]
    return [
        ScoredCandidate(movie=s.movie, match_score=s.match_score, rank=i)
        for i, s in enumerate(ordered, start=1)
    ]
