"""In-process TTL cache for TMDB trending pages.

Entries are keyed by ``(category, page)`` and expire lazily: a read that
finds an entry older than the TTL drops it and reports a miss. Nothing is
evicted for size.
"""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any, Callable

from .models.cache import CacheEntry, TrendingCategory

logger = logging.getLogger(__name__)

TRENDING_CACHE_TTL_S = 60 * 60


class TrendingCache:
    """Trending responses cached per category and page."""

    def __init__(
        self,
        ttl_s: float = TRENDING_CACHE_TTL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._lock = Lock()
        self._entries: dict[TrendingCategory, dict[int, CacheEntry]] = {
            category: {} for category in TrendingCategory
        }

    def get(self, category: TrendingCategory | str, page: int) -> Any | None:
        bucket = self._entries[TrendingCategory(category)]
        with self._lock:
            entry = bucket.get(page)
            if entry is None:
                return None
            # Still fresh at exactly ttl_s.
            if (self._clock() - entry.updated_at) > self.ttl_s:
                bucket.pop(page, None)
                logger.debug("Trending cache expired: %s page %s", category, page)
                return None
            return entry.data

    def put(self, category: TrendingCategory | str, page: int, data: Any) -> None:
        bucket = self._entries[TrendingCategory(category)]
        with self._lock:
            bucket[page] = CacheEntry(updated_at=self._clock(), data=data)

    def clear(self) -> None:
        with self._lock:
            for bucket in self._entries.values():
                bucket.clear()

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed.

        Only frees memory for keys nobody reads again; ``get`` checks expiry
        on its own.
        """
        removed = 0
        with self._lock:
            now = self._clock()
            for bucket in self._entries.values():
                stale = [
                    page
                    for page, entry in bucket.items()
                    if (now - entry.updated_at) > self.ttl_s
                ]
                for page in stale:
                    del bucket[page]
                removed += len(stale)
        if removed:
            logger.debug("Purged %d expired trending cache entries", removed)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._entries.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        category, page = key
        try:
            bucket = self._entries[TrendingCategory(category)]
        except ValueError:
            return False
        with self._lock:
            return page in bucket
