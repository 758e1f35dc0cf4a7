"""LangFuse 트레이싱 연동

``langfuse_enabled``가 꺼져 있거나 초기화에 실패하면 no-op 데코레이터를 돌려줍니다.
"""

import os
from typing import Optional

import litellm
from langfuse import Langfuse
from langfuse.decorators import observe

from oscarmatch.core.config import settings
from oscarmatch.core.logging import get_logger

logger = get_logger(__name__)


def initialize_langfuse() -> Optional[Langfuse]:
    """LangFuse 클라이언트 초기화 (비활성화 시 None)"""
    if not settings.langfuse_enabled:
        return None

    try:
        os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
        os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
        os.environ["LANGFUSE_HOST"] = settings.langfuse_host

        litellm.success_callback = ["langfuse"]

        client = Langfuse(
            secret_key=settings.langfuse_secret_key,
            public_key=settings.langfuse_public_key,
            host=settings.langfuse_host,
        )
        logger.info("LangFuse initialized")
        return client

    except Exception as e:  # noqa: BLE001
        logger.warning(
            f"LangFuse initialization failed: {e}. "
            "Continuing without tracing."
        )
        return None


langfuse_client = initialize_langfuse()


def _noop_observe(*args, **kwargs):
    def decorator(func):
        return func

    return decorator


def get_observe_decorator():
    """@observe 데코레이터 반환

    Example:
        observe = get_observe_decorator()

        @observe(name="smart_match_reason")
        async def generate(...):
            ...
    """
    if langfuse_client is not None:
        return observe
    return _noop_observe
