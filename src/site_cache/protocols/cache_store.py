"""Cache store protocol.

Defines the interface for the process-wide keyed store that holds the
last known value of every query the dashboard has read or written.

Entries never expire. Consistency comes from explicit writes made by
the mutation pipeline, not from background refetching.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from site_cache.entities import CacheEntryEntity

Updater = Callable[[Any], Any]
Listener = Callable[[str, Any], None]


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache store implementations.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from site_cache.protocols import CacheStore

        store: CacheStore = InMemoryCacheStore()
        store.set("/api/admin/faq", [])
        ```
    """

    def get(self, query_key: str) -> Any | None:
        """Read the value stored under a query key.

        Args:
            query_key: The query identifier

        Returns:
            The stored value, or None if absent
        """
        ...

    def get_entry(self, query_key: str) -> CacheEntryEntity | None:
        """Read the full entry (value and write timestamp).

        Args:
            query_key: The query identifier

        Returns:
            The entry, or None if absent
        """
        ...

    def has(self, query_key: str) -> bool:
        """Check whether a query key holds a value."""
        ...

    def set(self, query_key: str, value: Any | Updater) -> Any:
        """Write a value, or apply an updater to the current value.

        Args:
            query_key: The query identifier
            value: A replacement value, or a pure function old -> new

        Returns:
            The value now stored
        """
        ...

    def remove(self, query_key: str) -> bool:
        """Evict an entry explicitly.

        Args:
            query_key: The query identifier

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def subscribe(self, query_key: str, listener: Listener) -> Callable[[], None]:
        """Register a listener called when the value under a key changes.

        Args:
            query_key: The query identifier
            listener: Called with (query_key, new_value)

        Returns:
            A function that removes the listener
        """
        ...

    def keys(self) -> list[str]:
        """List the query keys currently stored."""
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        ...
