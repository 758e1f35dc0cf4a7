"""Discovery 라우터 (/movies)"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from oscarmatch.core.database import get_db
from oscarmatch.core.dependencies import verify_internal_api_key
from oscarmatch.core.schemas import APIResponse, create_response, error_responses
from oscarmatch.domains.discovery.schemas import (
    BriefResponse,
    ExplanationRequest,
    ExplanationResponse,
    ProgressInsightRequest,
    ProgressInsightResponse,
    QuickShotRequest,
    QuickShotResponse,
)
from oscarmatch.domains.discovery.service import DiscoveryService
from oscarmatch.domains.movies.repository import MovieRepository

router = APIRouter(
    dependencies=[Depends(verify_internal_api_key)],
    responses=error_responses(401, 422),
)


def get_discovery_service(
    session: AsyncSession = Depends(get_db),
) -> DiscoveryService:
    """DiscoveryService 의존성"""
    return DiscoveryService(catalog=MovieRepository(session))


@router.post(
    "/quick-shot",
    response_model=APIResponse[QuickShotResponse],
    responses=error_responses(404, 503),
)
async def quick_shot(
    data: QuickShotRequest,
    service: DiscoveryService = Depends(get_discovery_service),
):
    """무작위(또는 지정) 후보와 기대 포인트"""
    movie, text = await service.quick_shot(data.movie_id)
    return create_response(
        data=QuickShotResponse(movie=movie, recommendation=text)
    )


@router.post(
    "/progress-insight", response_model=APIResponse[ProgressInsightResponse]
)
async def progress_insight(
    data: ProgressInsightRequest,
    service: DiscoveryService = Depends(get_discovery_service),
):
    """시청 진행 상황 인사이트"""
    insight = await service.progress_insight(data)
    return create_response(data=ProgressInsightResponse(insight=insight))


@router.get(
    "/{movie_id}/brief",
    response_model=APIResponse[BriefResponse],
    responses=error_responses(404, 503),
)
async def brief(
    movie_id: str,
    service: DiscoveryService = Depends(get_discovery_service),
):
    """관람 전 브리프 (최초 요청 시 생성 후 저장)"""
    movie, text = await service.brief(movie_id)
    return create_response(data=BriefResponse(movie=movie, brief=text))


@router.post(
    "/{movie_id}/explanation",
    response_model=APIResponse[ExplanationResponse],
    responses=error_responses(404, 503),
)
async def explanation(
    movie_id: str,
    data: ExplanationRequest,
    service: DiscoveryService = Depends(get_discovery_service),
):
    """AI 선택 이유 설명"""
    prefs = data.preferences.to_preferences() if data.preferences else None
    movie, text = await service.explanation(movie_id, prefs)
    return create_response(
        data=ExplanationResponse(movie=movie, explanation=text)
    )
