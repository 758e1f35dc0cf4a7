"""Smart Match 상수

점수 가중치와 보너스 값은 조정 가능한 파라미터로 이름을 붙여 둡니다.
"""

from typing import Final

# 장르 센티널: 장르 선호 없음
SURPRISE: Final = "surprise"
MAX_GENRES: Final = 3

# 폼의 mood 식별자 → 영화 mood_tags에 저장된 표시 문자열
MOOD_TAGS: Final[dict[str, str]] = {
    "inspiration": "Inspiracja",
    "adrenaline": "Adrenalina",
    "emotions": "Głębokie emocje",
    "humor": "Humor",
    "ambitious": "Coś ambitnego",
    "romance": "Romantyczny wieczór",
}

# 시상식 연도 범위 (양 끝 포함)
DECADE_RANGES: Final[dict[str, tuple[int, int]]] = {
    "2000s": (2001, 2010),
    "2010s": (2011, 2020),
}
ALL_DECADES: Final = "both"

ANY: Final = "any"
BLOCKBUSTER: Final = "blockbuster"
CLASSIC: Final = "classic"
HIDDEN_GEM: Final = "hidden-gem"

# 후보 풀이 비어 있을 때의 인기도 임계값
DEFAULT_HIGH_THRESHOLD: Final = 100_000
DEFAULT_LOW_THRESHOLD: Final = 10_000
HIGH_PERCENTILE: Final = 0.25
LOW_PERCENTILE: Final = 0.75

# 단일 장르 강한 매칭 부스트
SINGLE_GENRE_BOOST: Final = 1.15
SINGLE_GENRE_BOOST_MIN_IMPORTANCE: Final = 0.8
MISSING_IMPORTANCE: Final = 1.0

# 런타임 버킷 (분). normal과 long은 150~180에서 겹침
SHORT_MAX_RUNTIME: Final = 120
NORMAL_MIN_RUNTIME: Final = 90  # 초과
NORMAL_MAX_RUNTIME: Final = 180
LONG_MIN_RUNTIME: Final = 150  # 초과

# 보너스
WINNER_BONUS: Final = 8
NOMINEE_BONUS: Final = 4
RATING_BONUSES: Final[tuple[tuple[float, int], ...]] = (
    (8.5, 6),
    (8.0, 4),
    (7.5, 2),
)
POPULARITY_BONUS: Final = 3
DECADE_BONUS: Final = 2

MAX_MATCH_SCORE: Final = 98
