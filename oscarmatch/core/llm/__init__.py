"""Core LLM 인프라 공개 API"""

from oscarmatch.core.llm.fallback import call_with_fallback
from oscarmatch.core.llm.generation import (
    GenerationTask,
    LLMTextGenerator,
    TextGenerator,
)
from oscarmatch.core.llm.observability import get_observe_decorator
from oscarmatch.core.llm.types import (
    AllProvidersFailedError,
    LLMMessage,
    LLMProviderError,
    LLMResult,
    LLMTier,
)

__all__ = [
    # Types
    "LLMTier",
    "LLMMessage",
    "LLMResult",
    "LLMProviderError",
    "AllProvidersFailedError",
    # Functions
    "call_with_fallback",
    # Generation
    "GenerationTask",
    "TextGenerator",
    "LLMTextGenerator",
    # Decorators
    "get_observe_decorator",
]
