"""In-memory implementation of CacheStore.

Holds the last known value of every query. Values are never expired or
refetched behind the caller's back; they change only through set() and
remove().
"""

import time
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from site_cache.entities import CacheEntryEntity
from site_cache.logging import get_logger
from site_cache.protocols import Listener, Updater

logger = get_logger(__name__)


class InMemoryCacheStore:
    """Dict-backed cache store with per-key change listeners.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Writes are synchronous, so a read followed by a write inside one
    handler cannot interleave with another writer on the event loop.
    Listeners fire only when the stored value changes identity, so an
    updater that returns the old value untouched causes no re-render.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize an empty store.

        Args:
            clock: Returns the current time in seconds (for testing).
        """
        self._clock = clock
        self._entries: dict[str, CacheEntryEntity] = {}
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def get(self, query_key: str) -> Any | None:
        entry = self._entries.get(query_key)
        return entry.data if entry is not None else None

    def get_entry(self, query_key: str) -> CacheEntryEntity | None:
        return self._entries.get(query_key)

    def has(self, query_key: str) -> bool:
        return query_key in self._entries

    def set(self, query_key: str, value: Any | Updater) -> Any:
        current = self._entries.get(query_key)
        new_value = value(current.data if current else None) if callable(value) else value

        if current is not None and current.data is new_value:
            return new_value

        self._entries[query_key] = CacheEntryEntity(
            query_key=query_key,
            data=new_value,
            timestamp=int(self._clock() * 1000),
        )
        logger.debug("Cache write: %s", query_key)
        self._notify(query_key, new_value)
        return new_value

    def remove(self, query_key: str) -> bool:
        if self._entries.pop(query_key, None) is None:
            return False
        logger.info("Cache entry removed: %s", query_key)
        self._notify(query_key, None)
        return True

    def subscribe(self, query_key: str, listener: Listener) -> Callable[[], None]:
        self._listeners[query_key].append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(query_key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def keys(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> int:
        keys = list(self._entries)
        self._entries.clear()
        for key in keys:
            self._notify(key, None)
        return len(keys)

    def _notify(self, query_key: str, value: Any) -> None:
        for listener in list(self._listeners.get(query_key, ())):
            listener(query_key, value)

    def __len__(self) -> int:
        return len(self._entries)
