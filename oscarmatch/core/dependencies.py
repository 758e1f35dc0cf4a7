"""공통 의존성 함수"""

import secrets

from fastapi import Header

from oscarmatch.core.config import settings
from oscarmatch.core.exceptions import ErrorCode, UnauthorizedException


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (프론트엔드 BFF 통신용)

    Raises:
        UnauthorizedException: 키가 일치하지 않는 경우 (INVALID_API_KEY)

    Example:
        router = APIRouter(dependencies=[Depends(verify_internal_api_key)])
    """
    if not secrets.compare_digest(
        x_internal_api_key.encode(), settings.internal_api_key.encode()
    ):
        raise UnauthorizedException(
            message="Nieprawidłowy klucz API.",
            error_code=ErrorCode.INVALID_API_KEY,
        )
