"""Simple in-memory TTL cache. No Redis needed for a lookup service.

Entries are stored as ``{"data": value, "timestamp": epoch_seconds}`` and
expire a fixed number of seconds after they were written. Expiry is only
checked on read; there is no size bound and no locking, so two concurrent
requests may both miss and fetch the same key. Each uvicorn worker has its
own cache instance.
"""

import time
from typing import Any

from config import settings


class TTLCache:
    def __init__(self, ttl_seconds: int = 3600):
        self.ttl_seconds = ttl_seconds
        self._store: dict[str, dict[str, Any]] = {}

    def _is_fresh(self, entry: dict[str, Any], now: float) -> bool:
        return now - entry["timestamp"] < self.ttl_seconds

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._is_fresh(entry, time.time()):
            return entry["data"]
        del self._store[key]
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = {"data": value, "timestamp": time.time()}

    def clear(self) -> int:
        """Drop every entry. Returns how many were removed."""
        count = len(self._store)
        self._store.clear()
        return count

    def status(self) -> dict:
        now = time.time()
        live = sum(1 for entry in self._store.values() if self._is_fresh(entry, now))
        return {
            "entries": len(self._store),
            "live_entries": live,
            "expired_entries": len(self._store) - live,
            "cache_duration_seconds": self.ttl_seconds,
        }


cache = TTLCache(ttl_seconds=settings.cache_ttl_seconds)
