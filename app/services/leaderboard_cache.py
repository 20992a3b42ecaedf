"""
Leaderboard Cache
Time-boxed memoization of leaderboard rankings.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class CacheEntry:
    """A cached value and the monotonic time it was computed."""

    def __init__(self, value: Any, stored_at: float):
        self.value = value
        self.stored_at = stored_at

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.stored_at < ttl


class LeaderboardCache:
    """
    Serves each ranking from memory for ``ttl_seconds`` after it was computed.

    One instance lives on ``app.state``; writes to the underlying tables do
    not invalidate it, so rankings may lag by up to one TTL.
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    async def get_or_compute(self, key: str, compute: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value for ``key``, recomputing it when stale.

        Each key recomputes under its own lock, so concurrent requests trigger
        at most one query per key and TTL window without waiting on other keys.
        """
        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            entry = self._entries.get(key)
            if entry and entry.is_fresh(self._clock(), self.ttl_seconds):
                return entry.value

            value = await compute()
            self._entries[key] = CacheEntry(value, self._clock())
            logger.debug(f"Recomputed leaderboard {key}")
            return value

    def invalidate(self, key: Optional[str] = None) -> None:
        """Drop one entry, or all of them."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
