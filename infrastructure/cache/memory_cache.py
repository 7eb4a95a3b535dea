import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from typing import Any

from domain.exceptions.currency import CacheWriteRejected
from domain.models.currency import CacheEntry, CacheStats

logger = logging.getLogger(__name__)


class InMemoryCacheService:
    """Process-wide key/value cache with per-entry TTL.

    Values are stored by reference, not copied. Anything put in the cache is
    shared by every reader and must be treated as an immutable snapshot.

    Expiry is enforced lazily on read and by a background sweep that runs
    every ``check_period`` seconds once :meth:`start` has been awaited.
    """

    def __init__(
        self,
        default_ttl: int = 900,
        check_period: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self.check_period = check_period
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._sweeper: asyncio.Task | None = None

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)

        if entry is not None and entry.is_expired(self._clock()):
            self._entries.pop(key, None)
            entry = None

        if entry is None:
            self._misses += 1
            logger.debug(f"Cache miss for key: {key}")
            return None

        self._hits += 1
        logger.debug(f"Cache hit for key: {key}")
        return entry.value

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        ttl = self.default_ttl if ttl is None else ttl
        try:
            expires_at = self._expiry_for(ttl)
        except CacheWriteRejected as e:
            logger.warning(f"Cache set rejected for key {key}: {e}")
            return False

        self._entries[key] = CacheEntry(key=key, value=value, expires_at=expires_at)
        logger.debug(f"Cache set for key: {key} (ttl={ttl}s)")
        return True

    def delete(self, key: str) -> int:
        count = 1 if self._entries.pop(key, None) is not None else 0
        logger.debug(f"Deleted {count} keys from cache ({key})")
        return count

    def flush(self) -> None:
        logger.info("Flushing entire cache")
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses, keys=len(self._entries))

    def sweep_expired(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")
        return len(expired)

    async def start(self) -> None:
        if self._sweeper is not None and not self._sweeper.done():
            return
        self._sweeper = asyncio.create_task(self._sweep_loop())
        logger.debug(
            f"Cache sweeper started (ttl={self.default_ttl}s, check_period={self.check_period}s)"
        )

    async def stop(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweeper
        self._sweeper = None

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.check_period)
            self.sweep_expired()

    def _expiry_for(self, ttl: int) -> float | None:
        if ttl < 0:
            raise CacheWriteRejected(f"TTL must not be negative, got {ttl}")
        # 0 keeps the entry until it is deleted or flushed
        if ttl == 0:
            return None
        return self._clock() + ttl
