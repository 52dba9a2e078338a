"""Per-process request performance counters, reported by /api/stats."""

import threading


class PerformanceStats:
    def __init__(self):
        self._lock = threading.Lock()
        self.requests = 0
        self.total_time_ms = 0.0
        self.cache_hits = 0
        self.cache_misses = 0

    def record_request(self, duration_ms: float, cache_hit: bool = False) -> None:
        with self._lock:
            self.requests += 1
            self.total_time_ms += duration_ms
            if cache_hit:
                self.cache_hits += 1
            else:
                self.cache_misses += 1

    def stats(self) -> dict:
        with self._lock:
            requests = self.requests
            return {
                "totalRequests": requests,
                "averageResponseTime": self.total_time_ms / requests if requests else 0,
                "cacheHitRate": self.cache_hits / requests * 100 if requests else 0,
                "cacheHits": self.cache_hits,
                "cacheMisses": self.cache_misses,
            }
