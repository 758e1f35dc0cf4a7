"""LLM 텍스트 생성 + 결정적 fallback 공통 베이스

LLM 호출은 best-effort입니다. 실패, 빈 응답, 너무 짧은 응답은 모두
하위 클래스가 정의한 템플릿 문구로 대체되며 호출자에게 예외가 전달되지 않습니다.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar

from oscarmatch.core.config import settings
from oscarmatch.core.llm.fallback import call_with_fallback
from oscarmatch.core.llm.types import AllProvidersFailedError, LLMMessage, LLMTier
from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import get_request_id

logger = get_logger(__name__)

ContextT = TypeVar("ContextT")


class TextGenerator(Protocol):
    async def complete(
        self,
        messages: list[LLMMessage],
        *,
        tier: LLMTier,
        temperature: float,
        max_tokens: int,
    ) -> str: ...


class LLMTextGenerator:
    """call_with_fallback 기반 기본 구현"""

    async def complete(
        self,
        messages: list[LLMMessage],
        *,
        tier: LLMTier,
        temperature: float,
        max_tokens: int,
    ) -> str:
        result = await call_with_fallback(
            tier=tier,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return result.content


def default_text_generator() -> Optional[TextGenerator]:
    """프로바이더 키가 없으면 None (항상 fallback 사용)"""
    if not settings.has_llm_provider:
        return None
    return LLMTextGenerator()


class GenerationTask(ABC, Generic[ContextT]):
    """프롬프트 구성과 fallback 템플릿을 가진 생성 작업

    Example:
        class BriefTask(GenerationTask[MovieDetail]):
            name = "brief"
            tier = LLMTier.STANDARD
            max_tokens = 600

            def build_messages(self, movie): ...
            def fallback(self, movie): ...

        text = await BriefTask().run(movie)
    """

    name: str = "generation"
    tier: LLMTier = LLMTier.STANDARD
    temperature: float = 0.7
    max_tokens: int = 100
    # 응답 길이가 이 값 이하이면 fallback
    min_length: int = 0

    def __init__(self, text_generator: Optional[TextGenerator] = None):
        self.text_generator = (
            text_generator
            if text_generator is not None
            else default_text_generator()
        )

    @abstractmethod
    def build_messages(self, context: ContextT) -> list[LLMMessage]:
        raise NotImplementedError

    @abstractmethod
    def fallback(self, context: ContextT) -> str:
        """네트워크 없이 항상 성공하는 템플릿 문구"""
        raise NotImplementedError

    async def run(self, context: ContextT) -> str:
        if self.text_generator is None:
            return self.fallback(context)

        try:
            text = await self.text_generator.complete(
                self.build_messages(context),
                tier=self.tier,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except AllProvidersFailedError as exc:
            logger.warning(
                f"[{self.name}] all providers failed, using fallback: "
                f"{exc.detail_info.get('attempted_models')}",
                extra={"request_id": get_request_id()},
            )
            return self.fallback(context)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                f"[{self.name}] generation failed, using fallback: {exc}",
                extra={"request_id": get_request_id()},
            )
            return self.fallback(context)

        text = (text or "").strip()
        if len(text) <= self.min_length:
            logger.warning(
                f"[{self.name}] degenerate response ({len(text)} chars), "
                "using fallback",
                extra={"request_id": get_request_id()},
            )
            return self.fallback(context)
        return text
