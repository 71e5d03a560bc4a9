"""
Key-value cache contract used by the game.

The engine only needs three things from a cache backend:
  - read(key)               -> value or None (missing or expired)
  - write(key, value, ttl)  -> store with a per-key expiry in seconds
  - fetch(key, ttl, build)  -> read, or build + write on a miss

Values are plain data (lists of words, letter-count dicts, floats), so any
backend that can hold JSON-ish values fits. MemoryCache is the in-process
implementation used by the CLI apps and the tests.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Protocol, Tuple

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    def read(self, key: str) -> Any: ...

    def write(self, key: str, value: Any, ttl: float) -> None: ...

    def delete(self, key: str) -> None: ...

    def fetch(self, key: str, ttl: float, builder: Callable[[], Any]) -> Any: ...


class MemoryCache:
    """
    Thread-safe in-memory cache with per-key TTL.

    fetch() is single-flight per key: when several threads miss the same key
    at once, one runs the builder and the others wait for its value. If the
    builder raises, nothing is stored and the error reaches the caller.

    Expired entries are dropped when read, and all of them are swept on the
    first write after `sweep_interval` seconds, so keys that are never read
    again (most dealt hands) don't pile up. Per-key locks live only while a
    fetch for that key is in flight.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 sweep_interval: float = 60.0):
        self._clock = clock
        self._sweep_interval = float(sweep_interval)
        self._last_sweep = clock()
        self._data: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        # key -> [lock, number of fetches holding or waiting on it]
        self._key_locks: Dict[str, list] = {}

    def read(self, key: str) -> Any:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._data[key]
                return None
            return value

    def write(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self._sweep_interval:
                self._prune_locked(now)
            self._data[key] = (now + float(ttl), value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def prune(self) -> int:
        """Drop every expired entry now; returns how many were removed."""
        with self._lock:
            return self._prune_locked(self._clock())

    def _prune_locked(self, now: float) -> int:
        expired = [k for k, (exp, _) in self._data.items() if now >= exp]
        for k in expired:
            del self._data[k]
        self._last_sweep = now
        if expired:
            logger.debug("pruned %d expired entries", len(expired))
        return len(expired)

    def fetch(self, key: str, ttl: float, builder: Callable[[], Any]) -> Any:
        value = self.read(key)
        if value is not None:
            logger.debug("cache hit: %s", key)
            return value

        with self._lock:
            slot = self._key_locks.setdefault(key, [threading.Lock(), 0])
            slot[1] += 1

        try:
            with slot[0]:
                # another thread may have filled it while we waited
                value = self.read(key)
                if value is not None:
                    logger.debug("cache hit after wait: %s", key)
                    return value
                logger.debug("cache miss: %s", key)
                value = builder()
                self.write(key, value, ttl)
                return value
        finally:
            with self._lock:
                slot[1] -= 1
                if slot[1] == 0:
                    del self._key_locks[key]

    def __contains__(self, key: str) -> bool:
        return self.read(key) is not None

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for exp, _ in self._data.values() if now < exp)
