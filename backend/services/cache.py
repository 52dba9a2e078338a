"""Simple in-memory TTL cache with a bounded entry count. No Redis needed.

Note: Each uvicorn worker (or serverless instance) has its own cache. There is
no cross-instance invalidation; draw data changes a few times a day at most and
TTLs are short, so different instances briefly seeing different generations is
acceptable.
"""

import json
import threading
import time
from typing import Any, Callable, Mapping

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_MAX_SIZE = 1000
STATS_KEY_SAMPLE = 10

# Rendering of a parameter the caller did not supply (None). Values are JSON
# encoded, so no string a client sends can render the same way.
ABSENT = json.dumps(None)


class TTLCache:
    """Key/value cache with per-entry expiry and oldest-first eviction.

    Expired entries are dropped lazily on read. When a new key would push the
    cache past ``max_size``, the entry with the oldest creation time is evicted
    first (a linear scan; the cache is small).
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.max_size = max_size
        self.default_ttl = default_ttl
        self._clock = clock
        # key -> (created_at, ttl_seconds, value)
        self._store: dict[str, tuple[float, float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            created_at, ttl, value = entry
            if self._clock() - created_at > ttl:
                del self._store[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        ttl = self.default_ttl if ttl_seconds is None else ttl_seconds
        with self._lock:
            if key not in self._store and len(self._store) >= self.max_size:
                self._evict_oldest()
            self._store[key] = (self._clock(), ttl, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def stats(self) -> dict:
        """Diagnostic snapshot: size, capacity and the first few keys."""
        with self._lock:
            return {
                "size": len(self._store),
                "maxSize": self.max_size,
                "keys": list(self._store)[:STATS_KEY_SAMPLE],
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def _evict_oldest(self) -> None:
        # Caller holds the lock.
        if not self._store:
            return
        oldest_key = min(self._store, key=lambda k: self._store[k][0])
        del self._store[oldest_key]


def build_key(operation: str, params: Mapping[str, Any] | None = None) -> str:
    """Build a canonical cache key, independent of parameter order.

    Values are JSON encoded: strings stay quoted, None becomes ``null``.

    >>> build_key("draws", {"year": "2024", "category": "PNP"})
    'draws?category:"PNP"|year:"2024"'
    """
    if not params:
        return operation
    rendered = "|".join(
        f"{name}:{json.dumps(params[name], ensure_ascii=False)}"
        for name in sorted(params)
    )
    return f"{operation}?{rendered}"
