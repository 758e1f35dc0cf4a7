"""전역 로깅 설정"""

import logging
import sys

from oscarmatch.core.config import settings

# 요청과 무관하게 너무 많은 로그를 남기는 외부 라이브러리
_NOISY_LOGGERS = ("httpx", "httpcore", "LiteLLM", "litellm", "asyncio")


class ColoredFormatter(logging.Formatter):
    """레벨별 색상을 입히는 포맷터 (개발 환경용)"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # 다른 핸들러에 색상 코드가 새지 않도록 원래 값을 복원
        original = record.levelname
        color = self.COLORS.get(original, self.RESET)
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _build_formatter() -> logging.Formatter:
    if settings.is_development:
        return ColoredFormatter(
            fmt=(
                "%(asctime)s | %(levelname)-8s | "
                "%(name)s:%(lineno)d | %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # 운영 환경: 로그 수집기에서 파싱하기 쉬운 한 줄 JSON 형태
    return logging.Formatter(
        fmt=(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        ),
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def setup_logging() -> None:
    """애플리케이션 로깅 설정 (시작 시 1회 호출)"""
    log_level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Example::

        from oscarmatch.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Smart Match started")
    """
    return logging.getLogger(name)
