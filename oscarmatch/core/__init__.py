"""Core 모듈"""

from oscarmatch.core.config import settings
from oscarmatch.core.exceptions import (
    BaseAPIException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    UnauthorizedException,
)
from oscarmatch.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "ErrorCode",
    "BaseAPIException",
    "UnauthorizedException",
    "NotFoundException",
    "InternalServerException",
    "ServiceUnavailableException",
    "get_logger",
    "setup_logging",
]
