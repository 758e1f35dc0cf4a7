"""추천 이유 캐시 단위 테스트"""

from datetime import datetime, timezone

import pytest

from conftest import FakeReasonGenerator
from oscarmatch.domains.smart_match.cache import (
    ReasonCache,
    build_preferences_hash,
    normalize_preferences,
)
from oscarmatch.domains.smart_match.types import CacheEntry, UserPreferences

PREFS = UserPreferences(
    mood="emotions",
    time="normal",
    genres=("Wojenny", "Dramat"),
    decade="2010s",
    popularity="classic",
)

STALE = datetime(2020, 1, 1, tzinfo=timezone.utc)


class TestPreferencesHash:
    def test_genre_order_does_not_matter(self):
        reordered = UserPreferences(
            mood="emotions",
            time="normal",
            genres=("Dramat", "Wojenny"),
            decade="2010s",
            popularity="classic",
        )

        assert build_preferences_hash(PREFS) == build_preferences_hash(reordered)

    def test_different_answers_give_different_hash(self):
        other = UserPreferences(
            mood="humor",
            time="normal",
            genres=("Wojenny", "Dramat"),
            decade="2010s",
            popularity="classic",
        )

        assert build_preferences_hash(PREFS) != build_preferences_hash(other)

    def test_missing_decade_and_popularity_normalized(self):
        prefs = UserPreferences(mood="emotions")
        explicit = UserPreferences(mood="emotions", decade="both", popularity="any")

        assert normalize_preferences(prefs)["decade"] == "both"
        assert normalize_preferences(prefs)["popularity"] == "any"
        assert build_preferences_hash(prefs) == build_preferences_hash(explicit)

    def test_hash_is_hex_sha256(self):
        digest = build_preferences_hash(PREFS)

        assert len(digest) == 64
        int(digest, 16)


class TestReasonCacheResolve:
    @pytest.mark.asyncio
    async def test_miss_generates_and_stores(self, make_movie, cache_store):
        generator = FakeReasonGenerator("Nowy powód.")
        cache = ReasonCache(cache_store, generator)
        movie = make_movie()

        reason = await cache.resolve(movie, PREFS, 87)

        assert reason == "Nowy powód."
        assert generator.calls == 1
        entry = cache_store.entries[(movie.id, build_preferences_hash(PREFS))]
        assert entry.cached_reason == "Nowy powód."
        assert entry.match_score == 87

    @pytest.mark.asyncio
    async def test_hit_skips_generation_and_touches(self, make_movie, cache_store):
        movie = make_movie()
        key = (movie.id, build_preferences_hash(PREFS))
        cache_store.entries[key] = CacheEntry(
            movie_id=movie.id,
            preferences_hash=key[1],
            cached_reason="Zapisany powód.",
            match_score=80,
            last_used=STALE,
        )
        generator = FakeReasonGenerator()
        cache = ReasonCache(cache_store, generator)

        reason = await cache.resolve(movie, PREFS, 91)

        assert reason == "Zapisany powód."
        assert generator.calls == 0
        assert cache_store.touched == [key]
        assert cache_store.entries[key].last_used > STALE

    @pytest.mark.asyncio
    async def test_second_identical_request_is_cache_hit(
        self, make_movie, cache_store
    ):
        generator = FakeReasonGenerator("Powód.")
        cache = ReasonCache(cache_store, generator)
        movie = make_movie()

        first = await cache.resolve(movie, PREFS, 70)
        second = await cache.resolve(movie, PREFS, 70)

        assert first == second
        assert generator.calls == 1

    @pytest.mark.asyncio
    async def test_cache_is_per_movie(self, make_movie, cache_store):
        generator = FakeReasonGenerator()
        cache = ReasonCache(cache_store, generator)

        await cache.resolve(make_movie(), PREFS, 70)
        await cache.resolve(make_movie(), PREFS, 70)

        assert generator.calls == 2
        assert len(cache_store.entries) == 2

    @pytest.mark.asyncio
    async def test_get_failure_generates_directly(self, make_movie, cache_store):
        cache_store.fail_on = {"get"}
        generator = FakeReasonGenerator("Bez cache.")
        cache = ReasonCache(cache_store, generator)

        reason = await cache.resolve(make_movie(), PREFS, 60)

        assert reason == "Bez cache."
        assert generator.calls == 1
        assert cache_store.entries == {}

    @pytest.mark.asyncio
    async def test_put_failure_still_returns_reason(self, make_movie, cache_store):
        cache_store.fail_on = {"put"}
        cache = ReasonCache(cache_store, FakeReasonGenerator("Powód."))

        reason = await cache.resolve(make_movie(), PREFS, 60)

        assert reason == "Powód."

    @pytest.mark.asyncio
    async def test_touch_failure_still_returns_hit(self, make_movie, cache_store):
        movie = make_movie()
        key = (movie.id, build_preferences_hash(PREFS))
        cache_store.entries[key] = CacheEntry(
            movie_id=movie.id,
            preferences_hash=key[1],
            cached_reason="Zapisany powód.",
            match_score=80,
        )
        cache_store.fail_on = {"touch"}
        generator = FakeReasonGenerator()
        cache = ReasonCache(cache_store, generator)

        reason = await cache.resolve(movie, PREFS, 80)

        assert reason == "Zapisany powód."
        assert generator.calls == 0

    @pytest.mark.asyncio
    async def test_put_overwrites_existing_entry(self, make_movie, cache_store):
        cache = ReasonCache(cache_store, FakeReasonGenerator())
        movie = make_movie()

        await cache.put(movie, PREFS, "Pierwszy.", 50)
        await cache.put(movie, PREFS, "Drugi.", 55)

        assert await cache.get(movie, PREFS) == "Drugi."
        assert len(cache_store.entries) == 1
