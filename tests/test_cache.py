import threading
import time

import pytest
from packages.cache import MemoryCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_write_read_and_expiry():
    clock = FakeClock()
    cache = MemoryCache(clock)
    cache.write("k", [1, 2], ttl=10)
    assert cache.read("k") == [1, 2]
    clock.now = 9.9
    assert "k" in cache
    clock.now = 10.0
    assert cache.read("k") is None
    assert len(cache) == 0

def test_fetch_builds_once_until_expiry():
    clock = FakeClock()
    cache = MemoryCache(clock)
    calls = []

    def build():
        calls.append(1)
        return {"n": len(calls)}

    assert cache.fetch("k", 60, build) == {"n": 1}
    assert cache.fetch("k", 60, build) == {"n": 1}
    clock.now = 61
    assert cache.fetch("k", 60, build) == {"n": 2}
    assert len(calls) == 2

def test_fetch_failure_stores_nothing():
    cache = MemoryCache()

    def boom():
        raise FileNotFoundError("gone")

    with pytest.raises(FileNotFoundError):
        cache.fetch("k", 60, boom)
    assert cache.read("k") is None

def test_delete_and_clear():
    cache = MemoryCache()
    cache.write("a", 1, 60)
    cache.write("b", 2, 60)
    cache.delete("a")
    assert cache.read("a") is None and cache.read("b") == 2
    cache.clear()
    assert len(cache) == 0

def test_fetch_is_single_flight():
    cache = MemoryCache()
    calls = []
    results = []

    def slow_build():
        calls.append(1)
        time.sleep(0.05)
        return "value"

    threads = [threading.Thread(target=lambda: results.append(cache.fetch("k", 60, slow_build)))
               for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert results == ["value"] * 8
    assert cache._key_locks == {}

def test_expired_keys_are_swept_on_write():
    clock = FakeClock()
    cache = MemoryCache(clock, sweep_interval=60)
    for i in range(1000):
        cache.fetch(f"feasibility/index/{i:010d}", 60, lambda: {"words": []})
    assert len(cache._data) == 1000
    assert cache._key_locks == {}

    clock.now = 10000
    cache.fetch("feasibility/index/fresh", 60, lambda: {"words": []})
    assert len(cache) == 1
    assert len(cache._data) == 1
    assert cache._key_locks == {}

def test_sweep_waits_for_interval():
    clock = FakeClock()
    cache = MemoryCache(clock, sweep_interval=100)
    cache.write("old", 1, ttl=10)
    clock.now = 50
    cache.write("new", 2, ttl=10)
    assert "old" in cache._data  # expired but not yet swept
    assert cache.prune() == 1
    assert set(cache._data) == {"new"}

def test_failed_fetch_releases_key_lock():
    cache = MemoryCache()

    def boom():
        raise ValueError("bad build")

    with pytest.raises(ValueError):
        cache.fetch("k", 60, boom)
    assert cache._key_locks == {}
