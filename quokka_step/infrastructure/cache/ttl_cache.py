from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
from threading import Lock
import time
from typing import Any


logger = logging.getLogger(__name__)


class TTLCache:
    """In-process key/value store with per-entry expiry.

    Expired entries are pruned lazily when read or in bulk by ``sweep``.
    There is no capacity bound and no LRU ordering.
    """

    def __init__(
        self,
        default_ttl_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be > 0.")
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            cached = self._entries.get(key)
            if cached is None:
                return None
            expires_at, value = cached
            if expires_at <= now:
                self._entries.pop(key, None)
                return None
            return value

    def has(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            cached = self._entries.get(key)
            return cached is not None and cached[0] > now

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError("ttl_seconds must be > 0.")
        expires_at = self._clock() + ttl
        with self._lock:
            self._entries[key] = (expires_at, value)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def sweep(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


async def run_periodic_sweep(cache: TTLCache, interval_seconds: float) -> None:
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be > 0.")
    while True:
        await asyncio.sleep(interval_seconds)
        removed = cache.sweep()
        if removed:
            logger.debug("ttl_cache: sweep removed=%s remaining=%s", removed, len(cache))
