"""Movies 도메인 예외"""

from enum import Enum
from typing import Optional

from oscarmatch.core.exceptions import (
    NotFoundException,
    ServiceUnavailableException,
)


class MovieErrorCode(str, Enum):
    """카탈로그 에러 코드"""

    MOVIE_NOT_FOUND = "MOVIE_NOT_FOUND"
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"


class MovieNotFoundException(NotFoundException):
    """요청한 영화가 카탈로그에 없는 경우"""

    def __init__(self, movie_id: Optional[str] = None):
        detail = {"movie_id": movie_id} if movie_id else {}
        super().__init__(
            message="Nie znaleziono filmu.",
            error_code=MovieErrorCode.MOVIE_NOT_FOUND,
            detail=detail,
        )


class CatalogUnavailableException(ServiceUnavailableException):
    """카탈로그 조회 자체가 실패한 경우 (재시도 가능)"""

    def __init__(self, reason: Optional[str] = None):
        detail = {"reason": reason} if reason else {}
        super().__init__(
            message="Katalog filmów jest chwilowo niedostępny. Spróbuj ponownie.",
            error_code=MovieErrorCode.CATALOG_UNAVAILABLE,
            detail=detail,
        )
