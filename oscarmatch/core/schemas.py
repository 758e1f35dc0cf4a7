"""공통 API 응답 스키마

Usage::

    from oscarmatch.core.schemas import APIResponse, create_response
    return create_response(data=result, message="Rekomendacje gotowe.")
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")

DEFAULT_SUCCESS_MESSAGE = "Żądanie zostało przetworzone."


class BaseSchema(BaseModel):
    """ORM 객체 변환이 가능한 기본 스키마"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @router.post("", response_model=APIResponse[SmartMatchResponse])
        async def smart_match(...):
            return create_response(data=result)
    """

    success: bool = True
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: Optional[DataT] = None


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_SUCCESS_MESSAGE,
    success: bool = True,
) -> APIResponse[DataT]:
    """APIResponse 생성 팩토리

    Generic 모델의 classmethod 대신 이 함수를 사용합니다.
    """
    return APIResponse(success=success, message=message, data=data)


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "Nie znaleziono filmów dla wybranych kryteriów. ...",
            "error": {
                "code": "NO_MATCHING_MOVIES",
                "message": "Nie znaleziono filmów dla wybranych kryteriów. ...",
                "detail": {"decade": "2010s", "popularity": "hidden-gem"}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail


def error_responses(*status_codes: int) -> dict[int, dict[str, Any]]:
    """라우터 ``responses=``에 넣을 에러 응답 문서 (OpenAPI)"""
    return {code: {"model": ErrorResponse} for code in status_codes}
