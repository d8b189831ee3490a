"""Tests for the TTL cache and the request rate limiter."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from smartplates.core.cache import TTLCache
from smartplates.core.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestTTLCache:
    def test_set_and_get(self, clock):
        cache = TTLCache(clock=clock)
        cache.set("pasta", ["Carbonara"])
        assert cache.get("pasta") == ["Carbonara"]
        assert "pasta" in cache
        assert cache.get("soup") is None

    def test_entries_expire(self, clock):
        cache = TTLCache(default_ttl=60, clock=clock)
        cache.set("pasta", 1)
        clock.advance(59)
        assert cache.get("pasta") == 1
        clock.advance(1)
        assert cache.get("pasta") is None
        assert len(cache) == 0

    def test_per_entry_ttl(self, clock):
        cache = TTLCache(default_ttl=60, clock=clock)
        cache.set("short", 1, ttl=5)
        cache.set("long", 2)
        clock.advance(10)
        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_least_recently_used_is_evicted(self, clock):
        cache = TTLCache(max_entries=2, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("b") is None
        assert cache.get("a") == 1
        assert cache.get("c") == 3
        assert len(cache) == 2

    def test_delete_and_clear(self, clock):
        cache = TTLCache(clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.delete("a") is True
        assert cache.delete("a") is False
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"default_ttl": 0}])
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            TTLCache(**kwargs)

    def test_invalid_ttl(self, clock):
        with pytest.raises(ValueError):
            TTLCache(clock=clock).set("a", 1, ttl=0)

    def test_expired_key_removed_during_get(self, clock):
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set("k", 1)

        def racing_clock():
            # Another thread drops the entry while get() inspects it
            cache._entries.pop("k", None)
            return clock.now + 100

        cache._clock = racing_clock
        assert cache.get("k") is None

    def test_live_key_removed_during_get(self, clock):
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set("k", 1)

        def racing_clock():
            cache._entries.pop("k", None)
            return clock.now

        cache._clock = racing_clock
        assert cache.get("k") == 1

    def test_concurrent_access(self):
        cache = TTLCache(max_entries=4, default_ttl=60)

        def worker(n):
            for i in range(200):
                key = f"key-{(n + i) % 8}"
                cache.set(key, i)
                cache.get(key)
                cache.delete(f"key-{i % 8}")
                len(cache)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(8)))

        assert len(cache) <= 4


class TestRateLimiter:
    def test_allows_up_to_limit(self, clock):
        limiter = RateLimiter(max_requests=3, window_seconds=60, clock=clock)

        assert [limiter.can_make_request("api") for _ in range(4)] == [True, True, True, False]
        assert limiter.get_remaining_requests("api") == 0

    def test_window_resets(self, clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        assert limiter.can_make_request("api") is True
        assert limiter.can_make_request("api") is False

        clock.advance(30)
        assert limiter.get_reset_time("api") == pytest.approx(30)

        clock.advance(30)
        assert limiter.can_make_request("api") is True

    def test_keys_are_independent(self, clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        assert limiter.can_make_request("a") is True
        assert limiter.can_make_request("b") is True
        assert limiter.can_make_request("a") is False

    def test_remaining_and_reset(self, clock):
        limiter = RateLimiter(max_requests=5, window_seconds=60, clock=clock)
        assert limiter.get_remaining_requests("api") == 5
        assert limiter.get_reset_time("api") == 0.0

        limiter.can_make_request("api")
        limiter.can_make_request("api")
        assert limiter.get_remaining_requests("api") == 3

        limiter.reset("api")
        assert limiter.get_remaining_requests("api") == 5

    def test_concurrent_requests_never_exceed_limit(self):
        limiter = RateLimiter(max_requests=10, window_seconds=60)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: limiter.can_make_request("api"), range(200)))

        assert results.count(True) == 10
        assert limiter.get_remaining_requests("api") == 0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            RateLimiter(max_requests=0, window_seconds=60)
        with pytest.raises(ValueError):
            RateLimiter(max_requests=1, window_seconds=0)
