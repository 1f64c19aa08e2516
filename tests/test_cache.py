# tests/test_cache.py

"""Response cache backends."""
import pytest

from infrastructure import MemoryResponseCache, NullResponseCache, SqliteResponseCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_null_cache_never_stores():
    cache = NullResponseCache()
    cache.set("k", {"a": 1})
    assert cache.get("k") is None


def test_memory_cache_expires_after_ttl():
    clock = FakeClock()
    cache = MemoryResponseCache(ttl_seconds=60, clock=clock)
    cache.set("k", {"a": 1})

    clock.now += 59
    assert cache.get("k") == {"a": 1}
    clock.now += 2
    assert cache.get("k") is None
    assert len(cache) == 0


def test_memory_cache_returns_copies():
    cache = MemoryResponseCache(ttl_seconds=60)
    cache.set("k", {"items": [1]})

    cache.get("k")["items"].append(2)

    assert cache.get("k") == {"items": [1]}


@pytest.fixture
def sqlite_cache(tmp_path):
    clock = FakeClock()
    cache = SqliteResponseCache(tmp_path / "nested" / "cache.sqlite", ttl_seconds=30, clock=clock)
    yield cache, clock
    cache.close()


def test_sqlite_cache_round_trips_json(sqlite_cache):
    cache, _ = sqlite_cache
    cache.set("history:a:b:5:", {"summary": "héllo", "n": [1, 2]})

    assert cache.get("history:a:b:5:") == {"summary": "héllo", "n": [1, 2]}
    assert cache.get("missing") is None


def test_sqlite_cache_ttl_and_purge(sqlite_cache):
    cache, clock = sqlite_cache
    cache.set("old", {"v": 1})
    clock.now += 20
    cache.set("new", {"v": 2})
    clock.now += 15

    assert cache.get("old") is None
    assert cache.get("new") == {"v": 2}
    clock.now += 100
    assert cache.purge_expired() == 1


def test_sqlite_cache_persists_across_connections(tmp_path):
    path = tmp_path / "cache.sqlite"
    first = SqliteResponseCache(path, ttl_seconds=60)
    first.set("k", {"v": 1})
    first.close()

    second = SqliteResponseCache(path, ttl_seconds=60)
    try:
        assert second.get("k") == {"v": 1}
    finally:
        second.close()
