"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from oscarmatch import __version__
from oscarmatch.core.schemas import APIResponse, create_response
from oscarmatch.domains.discovery.router import router as discovery_router
from oscarmatch.domains.smart_match.router import router as smart_match_router

api_router = APIRouter()

api_router.include_router(
    smart_match_router, prefix="/smart-match", tags=["Smart Match"]
)
api_router.include_router(discovery_router, prefix="/movies", tags=["Discovery"])


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트"""
    return create_response(
        data={"version": __version__, "docs": "/docs"},
        message="Coś Oscarowego API v1",
    )
