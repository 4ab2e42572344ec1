"""Bounded response cache for GET requests.

Entries are fresh for a fixed TTL. When the entry count exceeds the
ceiling, the oldest-inserted entry is evicted (FIFO, not LRU).
"""

import time
from collections.abc import Callable
from typing import Any

from site_cache.config import settings
from site_cache.entities import CacheEntryEntity
from site_cache.logging import get_logger

logger = get_logger(__name__)


class RequestCache:
    """Short-lived cache of decoded GET responses keyed by request."""

    def __init__(
        self,
        ttl: int | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the request cache.

        Args:
            ttl: Freshness window in seconds. Defaults to settings.
            max_entries: Entry ceiling. Defaults to settings.
            clock: Returns the current time in seconds (for testing).
        """
        self._ttl = settings.request_cache_ttl if ttl is None else ttl
        self._max_entries = settings.request_cache_max_entries if max_entries is None else max_entries
        if self._ttl < 0:
            raise ValueError(f"Request cache TTL must be zero or positive, got {self._ttl}")
        if self._max_entries < 1:
            raise ValueError(f"Request cache ceiling must be at least 1, got {self._max_entries}")
        self._clock = clock
        # dicts keep insertion order, which is the eviction order
        self._entries: dict[str, CacheEntryEntity] = {}

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def get(self, key: str) -> CacheEntryEntity | None:
        """Return the entry for a request key if it is still fresh."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._now_ms() - entry.timestamp < self._ttl * 1000:
            logger.debug("Request cache hit: %s", key)
            return entry

        del self._entries[key]
        logger.debug("Request cache entry expired: %s", key)
        return None

    def set(self, key: str, data: Any) -> CacheEntryEntity:
        """Store a response body and evict the oldest entries over the ceiling."""
        entry = CacheEntryEntity(query_key=key, data=data, timestamp=self._now_ms())
        self._entries[key] = entry

        while len(self._entries) > self._max_entries:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]
            logger.debug("Request cache full, evicted %s", oldest_key)

        return entry

    def delete(self, key: str) -> bool:
        """Drop one entry.

        Returns:
            True if the key was cached
        """
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        count = len(self._entries)
        self._entries.clear()
        return count

    def keys(self) -> list[str]:
        """Request keys in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def ttl(self) -> int:
        """Freshness window in seconds."""
        return self._ttl

    @property
    def max_entries(self) -> int:
        """Entry ceiling."""
        return self._max_entries
