"""예외 단위 테스트"""

from oscarmatch.core.exceptions import (
    ErrorCode,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    UnauthorizedException,
)
from oscarmatch.core.llm.types import AllProvidersFailedError, LLMProviderError
from oscarmatch.domains.movies.exceptions import (
    CatalogUnavailableException,
    MovieErrorCode,
    MovieNotFoundException,
)
from oscarmatch.domains.smart_match.exceptions import (
    NoMatchingMoviesException,
    SmartMatchErrorCode,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception(self):
        exc = NotFoundException()

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.message == "Nie znaleziono zasobu."
        assert exc.detail_info == {}

    def test_unauthorized_exception(self):
        exc = UnauthorizedException()

        assert exc.status_code == 401
        assert exc.error_code == ErrorCode.UNAUTHORIZED

    def test_internal_server_exception(self):
        exc = InternalServerException()

        assert exc.status_code == 500
        assert exc.error_code == ErrorCode.INTERNAL_ERROR

    def test_service_unavailable_exception(self):
        exc = ServiceUnavailableException()

        assert exc.status_code == 503
        assert exc.error_code == ErrorCode.SERVICE_UNAVAILABLE


class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_movie_not_found(self):
        exc = MovieNotFoundException("abc")

        assert exc.status_code == 404
        assert exc.error_code == MovieErrorCode.MOVIE_NOT_FOUND
        assert exc.detail_info == {"movie_id": "abc"}

    def test_catalog_unavailable(self):
        exc = CatalogUnavailableException(reason="OperationalError")

        assert exc.status_code == 503
        assert exc.error_code == MovieErrorCode.CATALOG_UNAVAILABLE
        assert exc.detail_info == {"reason": "OperationalError"}

    def test_no_matching_movies(self):
        exc = NoMatchingMoviesException(decade="2000s", popularity="hidden-gem")

        assert exc.status_code == 404
        assert exc.error_code == SmartMatchErrorCode.NO_MATCHING_MOVIES
        assert exc.detail_info == {"decade": "2000s", "popularity": "hidden-gem"}


class TestLLMExceptions:
    def test_provider_error(self):
        exc = LLMProviderError("gpt-4o", "timeout")

        assert exc.error_code == ErrorCode.LLM_PROVIDER_ERROR
        assert "gpt-4o" in exc.message

    def test_all_providers_failed(self):
        exc = AllProvidersFailedError(tier="light", attempts=["a", "b"])

        assert exc.error_code == ErrorCode.ALL_PROVIDERS_FAILED
        assert exc.detail_info["attempted_models"] == ["a", "b"]
