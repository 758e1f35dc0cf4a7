"""Smart Match 도메인 예외"""

from enum import Enum
from typing import Optional

from oscarmatch.core.exceptions import NotFoundException


class SmartMatchErrorCode(str, Enum):
    NO_MATCHING_MOVIES = "NO_MATCHING_MOVIES"


class NoMatchingMoviesException(NotFoundException):
    """decade/인기도 조합에 맞는 후보가 하나도 없는 경우

    사용자가 조건을 바꾸면 해결되므로 일반 오류와 구분합니다.
    """

    def __init__(
        self, decade: Optional[str] = None, popularity: Optional[str] = None
    ):
        super().__init__(
            message=(
                "Nie znaleziono filmów dla wybranych kryteriów. "
                "Spróbuj zmienić dekadę lub popularność."
            ),
            error_code=SmartMatchErrorCode.NO_MATCHING_MOVIES,
            detail={"decade": decade, "popularity": popularity},
        )


class CacheStoreUnavailableError(Exception):
    """추천 이유 캐시 저장소 접근 실패

    API 응답으로 내보내지 않습니다. ReasonCache가 잡아서 캐시 없이 진행합니다.
    """
