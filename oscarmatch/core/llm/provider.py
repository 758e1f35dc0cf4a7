"""LiteLLM 호출 래퍼

프로바이더를 직접 호출하는 곳은 이 모듈뿐입니다.
"""

import asyncio
import os
from typing import Optional

from litellm import acompletion

from oscarmatch.core.config import settings
from oscarmatch.core.llm.types import LLMMessage, LLMProviderError, LLMResult
from oscarmatch.core.logging import get_logger

logger = get_logger(__name__)


def _export_api_keys() -> None:
    """LiteLLM이 읽는 환경 변수로 API 키 노출"""
    os.environ.setdefault("OPENAI_API_KEY", settings.openai_api_key)
    os.environ.setdefault("ANTHROPIC_API_KEY", settings.anthropic_api_key)
    os.environ.setdefault("GEMINI_API_KEY", settings.google_api_key)


_export_api_keys()


async def acompletion_raw(
    model: str,
    messages: list[LLMMessage],
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
    timeout: Optional[float] = None,
) -> LLMResult:
    """단일 모델 completion 호출

    Args:
        model: LiteLLM 모델 이름 (예: "gpt-4o-mini")
        messages: 대화 메시지
        temperature: 샘플링 온도
        max_tokens: 최대 출력 토큰 수
        timeout: 초 단위 제한 시간 (None이면 settings.llm_timeout_seconds)

    Returns:
        LLMResult: 생성된 텍스트와 토큰 사용량

    Raises:
        LLMProviderError: 호출 실패, 타임아웃, 빈 응답
    """
    limit = timeout if timeout is not None else settings.llm_timeout_seconds
    try:
        response = await asyncio.wait_for(
            acompletion(
                model=model,
                messages=[msg.model_dump() for msg in messages],
                temperature=temperature,
                max_tokens=max_tokens,
            ),
            timeout=limit,
        )
    except asyncio.TimeoutError:
        logger.error(f"LiteLLM completion timed out after {limit}s: {model}")
        raise LLMProviderError(provider=model, original_error="timeout")
    except Exception as e:
        logger.error(f"LiteLLM completion failed for model {model}: {e}")
        raise LLMProviderError(provider=model, original_error=str(e))

    choice = response.choices[0]
    content = choice.message.content
    if content is None:
        raise LLMProviderError(provider=model, original_error="empty response")

    usage = getattr(response, "usage", None)
    return LLMResult(
        content=content,
        model=response.model or model,
        input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
        output_tokens=getattr(usage, "completion_tokens", 0) or 0,
        finish_reason=choice.finish_reason,
    )
