"""In-process implementation of CacheStore.

Keeps pickled entries in a dict guarded by a lock. Suitable for tests and
for single-process applications that do not run Redis.
"""

import pickle
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class _CacheEntry:
    expires_at: float | None
    payload: bytes


class MemoryCacheStore:
    """Dict-backed cache store with per-entry expiry.

    This class satisfies the CacheStore protocol through structural
    typing. Values are pickled on write and unpickled on read, so every
    caller gets its own copy, as with RedisCacheStore. Expired entries are
    dropped when read and swept on every write.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize the memory store.

        Args:
            clock: Returns the current time in seconds. Tests pass a fake
                clock to move past TTLs.
        """
        self._lock = threading.Lock()
        self._entries: dict[str, _CacheEntry] = {}
        self._clock = clock

    def _sweep(self, now: float) -> None:
        # Caller holds the lock
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.expires_at is not None and entry.expires_at <= now
        ]
        for key in expired:
            del self._entries[key]

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at is not None and entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            payload = entry.payload
        return pickle.loads(payload)

    def put(self, key: str, value: Any, ttl: int) -> None:
        payload = pickle.dumps(value)
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._entries[key] = _CacheEntry(expires_at=now + ttl, payload=payload)

    def forever(self, key: str, value: Any) -> None:
        payload = pickle.dumps(value)
        with self._lock:
            self._sweep(self._clock())
            self._entries[key] = _CacheEntry(expires_at=None, payload=payload)

    def forget(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def flush(self) -> None:
        with self._lock:
            self._entries.clear()

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
