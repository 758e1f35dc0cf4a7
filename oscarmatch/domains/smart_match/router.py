"""Smart Match 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from oscarmatch.core.database import get_db
from oscarmatch.core.dependencies import verify_internal_api_key
from oscarmatch.core.schemas import APIResponse, create_response, error_responses
from oscarmatch.domains.movies.repository import MovieRepository
from oscarmatch.domains.smart_match.repository import SmartMatchCacheRepository
from oscarmatch.domains.smart_match.schemas import (
    SmartMatchRequest,
    SmartMatchResponse,
)
from oscarmatch.domains.smart_match.service import SmartMatchService

router = APIRouter(
    dependencies=[Depends(verify_internal_api_key)],
    responses=error_responses(401, 422),
)


def get_smart_match_service(
    session: AsyncSession = Depends(get_db),
) -> SmartMatchService:
    """SmartMatchService 의존성 (카탈로그와 캐시가 같은 세션 사용)"""
    return SmartMatchService(
        catalog=MovieRepository(session),
        cache_store=SmartMatchCacheRepository(session),
    )


@router.post(
    "",
    response_model=APIResponse[SmartMatchResponse],
    responses=error_responses(404, 503),
)
async def smart_match(
    data: SmartMatchRequest,
    service: SmartMatchService = Depends(get_smart_match_service),
):
    """선호도 기반 상위 3개 추천"""
    result = await service.recommend(data.to_preferences())
    return create_response(
        data=SmartMatchResponse.from_result(result),
        message="Rekomendacje Smart Match gotowe.",
    )
