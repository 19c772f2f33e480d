"""TTL cache for aggregated trending lists.

Entries are keyed by lower-cased category and superseded in place on every
recompute; stale entries stay in the store until overwritten.
"""

import asyncio
import time
from collections.abc import Awaitable, MutableMapping
from dataclasses import dataclass
from typing import Callable, Optional

from news_aggregator.core.constants import DEFAULT_CACHE_TTL_SECONDS
from news_aggregator.models.article import Article
from news_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """One cached aggregate and the clock reading when it was stored."""

    timestamp: float
    data: list[Article]


class TrendingCache:
    """Category-keyed cache with a freshness window.

    The store is injectable so callers own its lifetime; by default it is a
    plain dict living as long as the cache.

    Attributes:
        ttl_seconds: Freshness window
        store: Mapping from normalized category to CacheEntry
        single_flight: Collapse concurrent recomputes of one key
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        store: Optional[MutableMapping[str, CacheEntry]] = None,
        clock: Callable[[], float] = time.monotonic,
        single_flight: bool = True,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Freshness window in seconds
            store: Backing mapping; a new dict when omitted
            clock: Monotonic time source in seconds
            single_flight: Collapse concurrent recomputes of one key
        """
        self.ttl_seconds = ttl_seconds
        self.store: MutableMapping[str, CacheEntry] = store if store is not None else {}
        self.clock = clock
        self.single_flight = single_flight
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    @staticmethod
    def normalize_key(category: Optional[str]) -> str:
        """Lower-case a category for lookup; no category is the "" key."""
        return (category or "").lower()

    def is_fresh(self, entry: CacheEntry) -> bool:
        """Whether an entry is still inside the freshness window."""
        return self.clock() - entry.timestamp < self.ttl_seconds

    def get(self, category: Optional[str]) -> Optional[list[Article]]:
        """Return the cached aggregate if present and fresh."""
        entry = self.store.get(self.normalize_key(category))
        if entry is not None and self.is_fresh(entry):
            return entry.data
        return None

    def put(self, category: Optional[str], data: list[Article]) -> CacheEntry:
        """Store an aggregate, replacing any previous entry for the key."""
        entry = CacheEntry(timestamp=self.clock(), data=data)
        self.store[self.normalize_key(category)] = entry
        return entry

    async def get_or_compute(
        self,
        category: Optional[str],
        compute_fn: Callable[[], Awaitable[list[Article]]],
    ) -> list[Article]:
        """Serve a fresh cached aggregate or compute and store a new one.

        Args:
            category: Requested category (any case)
            compute_fn: Coroutine function producing the aggregate

        Returns:
            The cached or freshly computed aggregate
        """
        key = self.normalize_key(category)

        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for category: {key or 'all'}")
            return cached

        if not self.single_flight:
            return await self._compute(key, compute_fn)

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                # Another request may have refreshed the key while we waited
                cached = self.get(key)
                if cached is not None:
                    logger.debug(f"Cache filled while waiting for category: {key or 'all'}")
                    return cached
                return await self._compute(key, compute_fn)
        finally:
            self._release_lock(key)

    def _release_lock(self, key: str) -> None:
        """Forget a key's lock once no request holds or awaits it."""
        remaining = self._lock_users[key] - 1
        if remaining:
            self._lock_users[key] = remaining
        else:
            del self._lock_users[key]
            del self._locks[key]

    async def _compute(
        self,
        key: str,
        compute_fn: Callable[[], Awaitable[list[Article]]],
    ) -> list[Article]:
        logger.debug(f"Cache miss for category: {key or 'all'}")
        data = await compute_fn()
        self.put(key, data)
        return data

    def stats(self) -> dict[str, int]:
        """Count stored and currently fresh entries."""
        entries = list(self.store.values())
        return {
            "entries": len(entries),
            "fresh_entries": sum(1 for entry in entries if self.is_fresh(entry)),
        }
