"""유틸리티 모듈"""

from oscarmatch.core.utils.datetime import UTC, now_utc
from oscarmatch.core.utils.time import measure_time

__all__ = [
    "UTC",
    "now_utc",
    "measure_time",
]
