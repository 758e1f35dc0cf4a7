"""처리 시간 측정"""

import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def measure_time() -> Generator[dict[str, float], None, None]:
    """블록 실행 시간을 밀리초 단위로 측정

    Usage:
        with measure_time() as timer:
            await service.recommend(prefs)
        logger.info(f"took {timer['elapsed_ms']:.1f}ms")

    블록에서 예외가 발생해도 ``elapsed_ms``는 채워집니다.
    """
    timer = {"elapsed_ms": 0.0}
    started = time.perf_counter()
    try:
        yield timer
    finally:
        timer["elapsed_ms"] = (time.perf_counter() - started) * 1000
