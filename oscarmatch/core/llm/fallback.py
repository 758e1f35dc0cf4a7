"""티어 기반 LLM fallback

호출하는 쪽은 모델이 아닌 티어만 지정합니다.
티어별 모델 순서는 설정(llm_light_models, llm_standard_models)에서 읽습니다.
"""

from typing import Optional

from oscarmatch.core.config import settings
from oscarmatch.core.llm.provider import acompletion_raw
from oscarmatch.core.llm.types import (
    AllProvidersFailedError,
    LLMMessage,
    LLMProviderError,
    LLMResult,
    LLMTier,
)
from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import get_request_id
from oscarmatch.core.utils.time import measure_time

logger = get_logger(__name__)


async def call_with_fallback(
    tier: LLMTier,
    messages: list[LLMMessage],
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
) -> LLMResult:
    """티어 기반 LLM 호출 (자동 fallback)

    앞의 모델이 실패하면 다음 모델로 재시도하고, 목록을 모두 소진하면
    AllProvidersFailedError를 발생시킵니다.

    Args:
        tier: LLM 티어
        messages: 대화 메시지
        temperature: 샘플링 온도
        max_tokens: 최대 출력 토큰

    Raises:
        AllProvidersFailedError: 모든 모델 실패 (또는 설정된 모델 없음)

    Example:
        result = await call_with_fallback(
            tier=LLMTier.LIGHT,
            messages=[LLMMessage(role="user", content="Cześć!")],
            max_tokens=100,
        )
    """
    models = settings.models_for_tier(tier.value)
    attempted: list[str] = []

    for model in models:
        with measure_time() as timer:
            try:
                result = await acompletion_raw(
                    model=model,
                    messages=messages,
                    temperature=temperature,
                    max_tokens=max_tokens,
                )
            except LLMProviderError as e:
                attempted.append(model)
                logger.warning(
                    f"Model {model} failed (tier={tier.value}): "
                    f"{e.detail_info.get('error')}. Trying next model...",
                    extra={"request_id": get_request_id()},
                )
                continue

        logger.info(
            f"LLM call succeeded: tier={tier.value}, model={model}, "
            f"tokens={result.input_tokens}/{result.output_tokens}, "
            f"time={timer['elapsed_ms']:.0f}ms",
            extra={"request_id": get_request_id()},
        )
        return result

    raise AllProvidersFailedError(tier=tier.value, attempts=attempted)
