from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from oscarmatch.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """전역 에러 코드"""

    # 공통 에러
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # 인증 관련
    INVALID_API_KEY = "INVALID_API_KEY"

    # LLM 관련
    LLM_PROVIDER_ERROR = "LLM_PROVIDER_ERROR"
    ALL_PROVIDERS_FAILED = "ALL_PROVIDERS_FAILED"


class BaseAPIException(HTTPException):
    """기본 API 예외 클래스

    응답 본문은 ``{success, message, error: {code, message, detail}}`` 형태로
    ``base_exception_handler``에서 직렬화됩니다.
    """

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.detail_info = detail or {}
        super().__init__(status_code=status_code, detail=message)


class UnauthorizedException(BaseAPIException):
    """401 Unauthorized"""

    def __init__(
        self,
        message: str = "Wymagane uwierzytelnienie.",
        error_code: str = ErrorCode.UNAUTHORIZED,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class NotFoundException(BaseAPIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "Nie znaleziono zasobu.",
        error_code: str = ErrorCode.NOT_FOUND,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class InternalServerException(BaseAPIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "Wewnętrzny błąd serwera.",
        error_code: str = ErrorCode.INTERNAL_ERROR,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class ServiceUnavailableException(BaseAPIException):
    """503 Service Unavailable

    외부 인프라(DB 등) 장애로 요청을 처리할 수 없는 경우입니다.
    클라이언트는 잠시 후 재시도할 수 있습니다.
    """

    def __init__(
        self,
        message: str = "Usługa jest chwilowo niedostępna.",
        error_code: str = ErrorCode.SERVICE_UNAVAILABLE,
        detail: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code=error_code,
            message=message,
            detail=detail,
        )


def _error_body(
    message: str, code: str, detail: Optional[Dict[str, Any]]
) -> Dict[str, Any]:
    return {
        "success": False,
        "message": message,
        "error": {
            "code": code,
            "message": message,
            "detail": detail,
        },
    }


async def base_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """BaseAPIException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.error_code, exc.detail_info),
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """HTTPException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), ErrorCode.INTERNAL_ERROR, None),
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """처리되지 않은 예외 핸들러"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "Wewnętrzny błąd serwera.", ErrorCode.INTERNAL_ERROR, None
        ),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 검증 실패 (422)"""
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "Nieprawidłowe dane żądania.",
            ErrorCode.VALIDATION_ERROR,
            {"errors": jsonable_encoder(exc.errors())},
        ),
    )
