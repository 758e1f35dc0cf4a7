"""LLM 공통 타입"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from oscarmatch.core.exceptions import ErrorCode, InternalServerException


class LLMTier(str, Enum):
    """LLM 티어

    Attributes:
        LIGHT: 짧은 텍스트 (빠른 추천 문구, 선택 이유 설명)
        STANDARD: 일반 텍스트 (Smart Match 이유, 관람 브리프, 진행 인사이트)
    """

    LIGHT = "light"
    STANDARD = "standard"


class LLMMessage(BaseModel):
    """LLM 메시지 (role: system | user | assistant)"""

    role: str
    content: str


class LLMResult(BaseModel):
    """LLM 호출 결과"""

    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    finish_reason: Optional[str] = None


class LLMProviderError(InternalServerException):
    """단일 모델 호출 실패 (타임아웃 포함)

    ``call_with_fallback``이 잡아서 다음 모델로 넘어갑니다.
    """

    def __init__(self, provider: str, original_error: str):
        super().__init__(
            message=f"LLM provider '{provider}' failed: {original_error}",
            error_code=ErrorCode.LLM_PROVIDER_ERROR,
            detail={"provider": provider, "error": original_error},
        )


class AllProvidersFailedError(InternalServerException):
    """티어의 모든 모델이 실패

    생성기는 이 예외를 잡아 결정적 템플릿 문구로 대체합니다.
    """

    def __init__(self, tier: str, attempts: list[str]):
        super().__init__(
            message=f"All providers failed for tier '{tier}'",
            error_code=ErrorCode.ALL_PROVIDERS_FAILED,
            detail={"tier": tier, "attempted_models": attempts},
        )
