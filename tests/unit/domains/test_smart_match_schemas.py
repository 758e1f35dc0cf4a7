"""Smart Match 요청/응답 스키마 테스트"""

import pytest
from pydantic import ValidationError

from oscarmatch.domains.smart_match.schemas import (
    MovieRecommendationResponse,
    SmartMatchRequest,
    SmartMatchResponse,
)
from oscarmatch.domains.smart_match.types import Recommendation, SmartMatchResult


class TestSmartMatchRequest:
    def test_surprise_wins_over_concrete_genres(self):
        req = SmartMatchRequest(genres=["Dramat", "surprise"])

        assert req.genres == ["surprise"]
        assert req.to_preferences().genres == ("surprise",)

    def test_more_than_three_genres_rejected(self):
        with pytest.raises(ValidationError):
            SmartMatchRequest(genres=["a", "b", "c", "d"])

    def test_all_fields_optional(self):
        prefs = SmartMatchRequest().to_preferences()

        assert prefs.mood is None
        assert prefs.genres == ()


class TestSmartMatchResponse:
    def test_from_result(self, make_movie):
        movie = make_movie(title="Her")
        result = SmartMatchResult(
            recommendations=[
                Recommendation(movie=movie, match_score=91, reason="Powód.", rank=1)
            ],
            total_analyzed=12,
        )

        response = SmartMatchResponse.from_result(result)

        assert response.total_analyzed == 12
        assert response.recommendations[0].movie.title == "Her"

    def test_score_above_98_rejected(self, make_movie):
        with pytest.raises(ValidationError):
            MovieRecommendationResponse(
                movie=make_movie(), match_score=99, reason="x", rank=1
            )
