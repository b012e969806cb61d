"""TTL-based response cache with in-flight request deduplication."""

import asyncio
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar
from dataclasses import dataclass

from ..logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_MISSING = object()


@dataclass
class CacheEntry:
    """A single cache entry."""
    data: Any
    timestamp: float
    ttl: Optional[float] = None  # per-entry override in seconds, None means global ttl


class ResponseCache:
    """In-memory cache with TTL expiry and coalescing of concurrent fetches.

    Expired entries are only dropped when they are looked up (``get``, ``has``
    or ``fetch``); there is no background sweep.
    """

    def __init__(self, ttl: float = 300, clock: Callable[[], float] = time.monotonic):
        self._cache: dict[str, CacheEntry] = {}
        self._pending: dict[str, asyncio.Future] = {}
        self._stale: set[str] = set()  # in-flight keys invalidated since they started
        self._ttl = ttl
        self._clock = clock
        self._hits = 0
        self._misses = 0

    @property
    def ttl(self) -> float:
        return self._ttl

    def _lookup(self, key: str) -> Any:
        """Return the fresh value for key or _MISSING, evicting stale entries."""
        entry = self._cache.get(key)
        if entry is None:
            return _MISSING

        ttl = entry.ttl if entry.ttl is not None else self._ttl
        if self._clock() - entry.timestamp > ttl:
            # Expired
            del self._cache[key]
            logger.debug("cache evicted %s", key, extra={"event": "evicted", "cache_key": key})
            return _MISSING

        return entry.data

    def get(self, key: str, default: Any = None) -> Any:
        """Get cached data if not expired, else ``default``."""
        value = self._lookup(key)
        if value is _MISSING:
            self._misses += 1
            return default
        self._hits += 1
        return value

    def has(self, key: str) -> bool:
        """Check whether a fresh entry exists for key."""
        return self._lookup(key) is not _MISSING

    def set(self, key: str, data: Any, ttl: Optional[float] = None) -> None:
        """Set cache data, optionally with its own TTL in seconds."""
        self._cache[key] = CacheEntry(
            data=data,
            timestamp=self._clock(),
            ttl=ttl,
        )

    def invalidate(self, key: str) -> None:
        """Invalidate a cache entry.

        A retrieval already in flight for the key keeps serving its waiters
        but its result is not stored.
        """
        self._cache.pop(key, None)
        if key in self._pending:
            self._stale.add(key)

    def invalidate_pattern(self, pattern: str) -> int:
        """Invalidate every entry whose key contains ``pattern``."""
        keys = [key for key in self._cache if pattern in key]
        for key in keys:
            del self._cache[key]
        self._stale.update(key for key in self._pending if pattern in key)
        return len(keys)

    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()
        self._stale.update(self._pending)

    def set_ttl(self, ttl: float) -> None:
        """Change the global TTL used for entries stored without their own."""
        self._ttl = ttl

    def in_flight(self, key: str) -> bool:
        return key in self._pending

    def stats(self) -> dict[str, Any]:
        """Counters for the stats endpoint."""
        return {
            "size": len(self._cache),
            "inFlight": len(self._pending),
            "hits": self._hits,
            "misses": self._misses,
            "ttl": self._ttl,
        }

    async def fetch(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[T]],
        ttl: Optional[float] = None,
    ) -> T:
        """Return the cached value for key, calling ``fetcher`` at most once.

        Concurrent callers for the same key share one call to ``fetcher`` and
        all see its result or its exception. Failures are never cached.
        """
        cached = self._lookup(key)
        if cached is not _MISSING:
            self._hits += 1
            logger.debug("cache hit %s", key, extra={"event": "hit", "cache_key": key})
            return cached

        pending = self._pending.get(key)
        if pending is None:
            self._misses += 1
            logger.debug("cache miss %s", key, extra={"event": "miss", "cache_key": key})
            # Registered before the first await so later callers coalesce onto it
            pending = asyncio.ensure_future(self._retrieve(key, fetcher, ttl))
            pending.add_done_callback(_consume_exception)
            self._pending[key] = pending
        else:
            logger.debug("cache coalesced %s", key, extra={"event": "coalesced", "cache_key": key})

        # A cancelled caller must not cancel the shared retrieval
        return await asyncio.shield(pending)

    async def _retrieve(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[T]],
        ttl: Optional[float],
    ) -> T:
        try:
            data = await fetcher()
            if key in self._stale:
                logger.debug(
                    "cache dropped result of invalidated %s", key,
                    extra={"event": "dropped", "cache_key": key},
                )
            else:
                self.set(key, data, ttl)
            return data
        except Exception as exc:
            logger.warning(
                "cache retrieval failed for %s: %s", key, exc,
                extra={"event": "failed", "cache_key": key},
            )
            raise
        finally:
            self._pending.pop(key, None)
            self._stale.discard(key)


def _consume_exception(future: asyncio.Future) -> None:
    # Waiters may all be gone; mark the outcome as retrieved
    if not future.cancelled():
        future.exception()
