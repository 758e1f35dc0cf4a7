"""날짜/시간 유틸리티"""

from datetime import datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (캐시 last_used_at 갱신 등에 사용)"""
    return datetime.now(UTC)
