from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from oscarmatch import __version__
from oscarmatch.api.v1 import api_router as api_v1_router
from oscarmatch.core.config import settings
from oscarmatch.core.database import close_db, init_db
from oscarmatch.core.exceptions import (
    BaseAPIException,
    base_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from oscarmatch.core.logging import get_logger, setup_logging
from oscarmatch.core.middlewares import LoggingMiddleware
from oscarmatch.core.schemas import APIResponse, create_response

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info(f"🚀 Starting {settings.app_name} ({settings.app_env})...")

    if settings.auto_create_tables:
        await init_db()
        logger.info("Database tables ensured")

    if not settings.has_llm_provider:
        logger.warning(
            "No LLM provider key configured, all texts use templates"
        )

    yield

    logger.info(f"👋 Shutting down {settings.app_name}...")
    await close_db()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리"""
    app = FastAPI(
        title=settings.app_name,
        description="Smart Match: dopasowanie filmów oscarowych do preferencji",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    # 아래에서 위로 실행됨
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(BaseAPIException, base_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get(
        "/health", tags=["Health"], response_model=APIResponse[dict[str, Any]]
    )
    async def health_check():
        """헬스 체크"""
        return create_response(
            data={
                "status": "healthy",
                "app_name": settings.app_name,
                "environment": settings.app_env,
            },
            message="OK",
        )

    return app


app = create_app()
