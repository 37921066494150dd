"""Tests for the snapshot cache TTL and rebuild behaviour."""

import threading
import time

import pytest

from recruit_assistant.data.aggregator import build_snapshot
from recruit_assistant.data.cache import CacheState, SnapshotCache
from recruit_assistant.errors import SourceUnavailable


class CountingBuilder:
    def __init__(self, source):
        self.source = source
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return build_snapshot(self.source)


@pytest.fixture
def builder(source):
    return CountingBuilder(source)


@pytest.fixture
def cache(builder, clock):
    return SnapshotCache(builder, ttl_seconds=300, clock=clock)


class TestSnapshotCacheTTL:
    def test_starts_empty(self, cache, builder):
        assert cache.state is CacheState.EMPTY
        assert cache.peek() is None
        assert builder.calls == 0

    def test_get_within_ttl_returns_same_snapshot(self, cache, builder, clock):
        first = cache.get()
        clock.advance(299)
        second = cache.get()
        assert first is second
        assert builder.calls == 1
        assert cache.state is CacheState.FRESH

    def test_get_after_ttl_rebuilds_once(self, cache, builder, clock):
        first = cache.get()
        clock.advance(301)
        assert cache.state is CacheState.STALE

        second = cache.get()
        third = cache.get()
        assert second is not first
        assert second is third
        assert builder.calls == 2

    def test_refresh_always_rebuilds(self, cache, builder):
        first = cache.get()
        second = cache.refresh()
        assert second is not first
        assert cache.get() is second
        assert builder.calls == 2

    def test_invalidate(self, cache, builder):
        cache.get()
        cache.invalidate()
        assert cache.state is CacheState.EMPTY
        cache.get()
        assert builder.calls == 2

    def test_age(self, cache, clock):
        assert cache.age_seconds is None
        cache.get()
        clock.advance(42)
        assert cache.age_seconds == 42


class TestSnapshotCacheFailures:
    def test_empty_cache_propagates_error(self, cache, source):
        source.fail = ConnectionError("db down")
        with pytest.raises(SourceUnavailable, match="failed to load data: db down"):
            cache.get()
        assert cache.state is CacheState.EMPTY

    def test_empty_cache_retries_on_next_get(self, cache, source, builder):
        source.fail = ConnectionError("db down")
        with pytest.raises(SourceUnavailable):
            cache.get()
        source.fail = None
        assert cache.get().profiles_count == 3
        assert builder.calls == 2

    def test_stale_cache_serves_previous_snapshot(self, cache, source, clock):
        first = cache.get()
        clock.advance(301)
        source.fail = ConnectionError("db down")
        assert cache.get() is first
        assert cache.state is CacheState.STALE

    def test_failed_refresh_keeps_previous_snapshot(self, cache, source):
        first = cache.get()
        source.fail = ConnectionError("db down")
        with pytest.raises(SourceUnavailable):
            cache.refresh()
        assert cache.peek() is first
        assert cache.get() is first


class TestSingleFlight:
    def test_concurrent_gets_share_one_build(self, source, clock):
        started = threading.Event()
        release = threading.Event()
        calls = []

        def slow_builder():
            calls.append(1)
            started.set()
            release.wait(timeout=5)
            return build_snapshot(source)

        cache = SnapshotCache(slow_builder, ttl_seconds=300, clock=clock)
        results = []

        def reader():
            results.append(cache.get())

        threads = [threading.Thread(target=reader) for _ in range(5)]
        threads[0].start()
        assert started.wait(timeout=5)
        assert cache.state is CacheState.REBUILDING
        for t in threads[1:]:
            t.start()
        time.sleep(0.05)
        release.set()
        for t in threads:
            t.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 5
        assert all(r is results[0] for r in results)


def test_peek_waits_for_publication(cache):
    # peek shares the lock with the rebuild's publish step
    with cache._lock:
        reader = threading.Thread(target=cache.peek)
        reader.start()
        reader.join(timeout=0.05)
        assert reader.is_alive()
    reader.join(timeout=5)
    assert not reader.is_alive()
