"""Smart Match 점수 계산 단위 테스트"""

import pytest

from oscarmatch.domains.movies.schemas import ThematicTag
from oscarmatch.domains.smart_match.scoring import (
    BASE_WEIGHTS,
    SINGLE_GENRE_WEIGHTS,
    TWO_GENRE_WEIGHTS,
    bonus_score,
    calculate_match_score,
    genre_score,
    mood_score,
    runtime_matches,
    score_breakdown,
    weights_for,
)
from oscarmatch.domains.smart_match.types import UserPreferences


@pytest.fixture
def drama(make_movie):
    return make_movie(
        mood_tags=["Głębokie emocje"],
        thematic_tags=[ThematicTag(tag="Dramat", importance=0.9)],
        runtime=130,
        vote_average=7.0,
        vote_count=50_000,
        oscar_year=2015,
    )


class TestWeights:
    """장르 수에 따른 가중치 프로필"""

    @pytest.mark.parametrize(
        "genres,expected",
        [
            ((), BASE_WEIGHTS),
            (("surprise",), BASE_WEIGHTS),
            (("Dramat",), SINGLE_GENRE_WEIGHTS),
            (("Dramat", "Wojenny"), TWO_GENRE_WEIGHTS),
            (("Dramat", "Wojenny", "Komedia"), BASE_WEIGHTS),
        ],
    )
    def test_profile_selection(self, genres, expected):
        assert weights_for(genres) == expected

    def test_every_profile_sums_to_100(self):
        for profile in (BASE_WEIGHTS, SINGLE_GENRE_WEIGHTS, TWO_GENRE_WEIGHTS):
            assert profile.total == 100

    def test_runtime_weight_is_constant(self):
        assert {
            BASE_WEIGHTS.runtime,
            SINGLE_GENRE_WEIGHTS.runtime,
            TWO_GENRE_WEIGHTS.runtime,
        } == {10}


class TestMoodScore:
    def test_matching_mood_gets_full_weight(self, drama):
        assert mood_score(drama, UserPreferences(mood="emotions"), 35) == 35

    def test_other_mood(self, drama):
        assert mood_score(drama, UserPreferences(mood="humor"), 35) == 0

    def test_unknown_mood_contributes_nothing(self, drama):
        assert mood_score(drama, UserPreferences(mood="nostalgia"), 35) == 0

    def test_no_mood_tags(self, make_movie):
        movie = make_movie(mood_tags=[])
        assert mood_score(movie, UserPreferences(mood="emotions"), 35) == 0


class TestGenreScore:
    def test_surprise_gets_full_weight_even_without_tags(self, make_movie):
        movie = make_movie(thematic_tags=[])
        prefs = UserPreferences(genres=("surprise",))

        assert genre_score(movie, prefs, 30) == 30

    def test_single_strong_genre_is_boosted(self, drama):
        prefs = UserPreferences(genres=("Dramat",))

        assert genre_score(drama, prefs, 45) == pytest.approx(45 * 1.15)

    def test_single_weak_genre_is_scaled_by_importance(self, make_movie):
        movie = make_movie(thematic_tags=[ThematicTag(tag="Dramat", importance=0.5)])
        prefs = UserPreferences(genres=("Dramat",))

        assert genre_score(movie, prefs, 45) == pytest.approx(22.5)

    def test_missing_importance_counts_as_full_without_boost(self, make_movie):
        movie = make_movie(thematic_tags=[ThematicTag(tag="Dramat")])
        prefs = UserPreferences(genres=("Dramat",))

        assert genre_score(movie, prefs, 45) == pytest.approx(45)

    def test_two_genres_average_importance(self, make_movie):
        movie = make_movie(
            thematic_tags=[
                ThematicTag(tag="Dramat", importance=1.0),
                ThematicTag(tag="Wojenny", importance=0.5),
            ]
        )
        prefs = UserPreferences(genres=("Dramat", "Wojenny"))

        assert genre_score(movie, prefs, 38) == pytest.approx(0.75 * 38)

    def test_unmatched_genre(self, drama):
        prefs = UserPreferences(genres=("Komedia",))

        assert genre_score(drama, prefs, 45) == 0

    def test_never_exceeds_boost_cap(self, make_movie):
        movie = make_movie(
            thematic_tags=[
                ThematicTag(tag="Dramat", importance=1.0),
                ThematicTag(tag="Dramat", importance=1.0),
            ]
        )
        prefs = UserPreferences(genres=("Dramat",))

        assert genre_score(movie, prefs, 45) <= 45 * 1.15


class TestRuntime:
    @pytest.mark.parametrize(
        "runtime,time,expected",
        [
            (120, "short", True),
            (121, "short", False),
            (90, "normal", False),
            (91, "normal", True),
            (180, "normal", True),
            (181, "normal", False),
            (150, "long", False),
            (151, "long", True),
            (95, "any", True),
            (95, "marathon", False),
        ],
    )
    def test_buckets(self, runtime, time, expected):
        assert runtime_matches(runtime, time) is expected

    def test_normal_and_long_overlap(self):
        assert runtime_matches(160, "normal")
        assert runtime_matches(160, "long")

    def test_missing_runtime_scores_zero(self, make_movie):
        movie = make_movie(runtime=None)
        breakdown = score_breakdown(movie, UserPreferences(time="any"))

        assert breakdown.runtime == 0


class TestBonusScore:
    def test_winner_with_top_rating(self, make_movie):
        movie = make_movie(is_best_picture_winner=True, vote_average=8.7)

        assert bonus_score(movie, UserPreferences(), 25) == 8 + 6

    def test_nominee_with_good_rating(self, make_movie):
        movie = make_movie(vote_average=7.6)

        assert bonus_score(movie, UserPreferences(), 25) == 4 + 2

    def test_popularity_and_decade_bonus(self, make_movie):
        movie = make_movie(vote_average=6.0, vote_count=10, oscar_year=2004)
        prefs = UserPreferences(popularity="hidden-gem", decade="2000s")

        assert bonus_score(movie, prefs, 25) == 4 + 3 + 2

    def test_any_popularity_and_both_decades_give_nothing(self, make_movie):
        movie = make_movie(vote_average=6.0)
        prefs = UserPreferences(popularity="any", decade="both")

        assert bonus_score(movie, prefs, 25) == 4

    def test_capped_by_weight(self, make_movie):
        movie = make_movie(
            is_best_picture_winner=True, vote_average=9.0, oscar_year=2012
        )
        prefs = UserPreferences(popularity="classic", decade="2010s")

        # 8 + 6 + 3 + 2 = 19 > 18
        assert bonus_score(movie, prefs, 18) == 18


class TestCalculateMatchScore:
    def test_full_example(self, drama):
        prefs = UserPreferences(
            mood="emotions",
            time="normal",
            genres=("Dramat",),
            decade="2010s",
            popularity="any",
        )

        # 25 + 51.75 + 10 + (4 + 2) = 92.75
        assert calculate_match_score(drama, prefs) == 93

    def test_capped_at_98(self, make_movie):
        movie = make_movie(
            is_best_picture_winner=True,
            vote_average=8.6,
            oscar_year=2013,
            runtime=100,
            mood_tags=["Humor"],
            thematic_tags=[ThematicTag(tag="Komedia", importance=1.0)],
        )
        prefs = UserPreferences(
            mood="humor",
            time="short",
            genres=("Komedia",),
            decade="2010s",
            popularity="blockbuster",
        )

        assert calculate_match_score(movie, prefs) == 98

    def test_half_rounds_up(self, make_movie):
        movie = make_movie(
            vote_average=7.0,
            thematic_tags=[
                ThematicTag(tag="Dramat", importance=1.0),
                ThematicTag(tag="Wojenny", importance=0.5),
            ],
        )
        prefs = UserPreferences(
            mood="emotions", time="normal", genres=("Dramat", "Wojenny")
        )

        # 30 + 28.5 + 10 + 4 = 72.5
        assert calculate_match_score(movie, prefs) == 73

    def test_empty_preferences_only_bonus(self, drama):
        assert calculate_match_score(drama, UserPreferences()) == 4

    def test_unknown_values_do_not_fail(self, drama):
        prefs = UserPreferences(
            mood="nostalgia",
            time="marathon",
            genres=("Western",),
            decade="1990s",
            popularity="cult",
        )

        score = calculate_match_score(drama, prefs)

        assert 0 <= score <= 98

    def test_is_deterministic(self, drama):
        prefs = UserPreferences(mood="emotions", genres=("Dramat",))

        assert calculate_match_score(drama, prefs) == calculate_match_score(
            drama, prefs
        )

    def test_score_is_bounded_for_many_combinations(self, make_movie):
        moods = ("inspiration", "emotions", "humor", None)
        times = ("short", "normal", "long", "any", None)
        genre_sets = ((), ("surprise",), ("Dramat",), ("Dramat", "Historyczny"))
        movie = make_movie(
            is_best_picture_winner=True,
            vote_average=9.1,
            runtime=160,
            mood_tags=["Inspiracja", "Głębokie emocje"],
            thematic_tags=[
                ThematicTag(tag="Dramat", importance=1.0),
                ThematicTag(tag="Historyczny", importance=0.95),
            ],
        )

        for mood in moods:
            for time in times:
                for genres in genre_sets:
                    prefs = UserPreferences(
                        mood=mood,
                        time=time,
                        genres=genres,
                        decade="2010s",
                        popularity="classic",
                    )
                    assert 0 <= calculate_match_score(movie, prefs) <= 98

    def test_matching_mood_never_lowers_score(self, drama):
        base = UserPreferences(genres=("Dramat",), time="normal")
        with_mood = UserPreferences(
            mood="emotions", genres=("Dramat",), time="normal"
        )

        assert calculate_match_score(drama, with_mood) >= calculate_match_score(
            drama, base
        )


class TestGenreReweighting:
    """장르를 좁힐수록 장르 기여 비중이 커짐"""

    def test_genre_share_grows_as_selection_narrows(self, make_movie):
        movie = make_movie(
            thematic_tags=[
                ThematicTag(tag="Dramat", importance=0.7),
                ThematicTag(tag="Historyczny", importance=0.7),
                ThematicTag(tag="Wojenny", importance=0.7),
            ]
        )
        selections = [
            ("Dramat", "Historyczny", "Wojenny"),
            ("Dramat", "Historyczny"),
            ("Dramat",),
        ]

        shares = []
        for genres in selections:
            breakdown = score_breakdown(
                movie,
                UserPreferences(mood="emotions", time="normal", genres=genres),
            )
            shares.append(breakdown.genre / breakdown.total)

        assert shares == sorted(shares)

    def test_boost_beats_plain_formula(self, drama):
        prefs = UserPreferences(genres=("Dramat",))

        boosted = genre_score(drama, prefs, SINGLE_GENRE_WEIGHTS.genre)

        assert boosted > 0.9 * SINGLE_GENRE_WEIGHTS.genre
