"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from oscarmatch.core.logging import get_logger
from oscarmatch.core.middlewares.context import set_request_id
from oscarmatch.core.utils.time import measure_time

logger = get_logger(__name__)

SKIP_PATHS = frozenset(
    {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}
)


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 부여, 처리 시간 측정, 요청/응답 로깅"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in SKIP_PATHS:
            return cast(Response, await call_next(request))

        request_id = set_request_id(request.headers.get("X-Request-ID"))
        route = f"{request.method} {request.url.path}"

        logger.info(f"[{request_id}] → {route}")

        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"[{request_id}] ✗ {route} | Error: {e} "
                    f"| Time: {timer['elapsed_ms']:.2f}ms"
                )
                raise

        elapsed = timer["elapsed_ms"]
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.2f}ms"

        if response.status_code < 400:
            logger.info(
                f"[{request_id}] ✓ {route} | {response.status_code} "
                f"| {elapsed:.2f}ms"
            )
        else:
            logger.warning(
                f"[{request_id}] ✗ {route} | {response.status_code} "
                f"| {elapsed:.2f}ms"
            )

        return cast(Response, response)
