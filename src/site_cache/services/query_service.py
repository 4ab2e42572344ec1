"""Query service for cache-first reads.

A query key is the endpoint path. The first read of a key goes to the
API and stores the result; every later read is served from the cache
store until a mutation rewrites it or it is evicted explicitly.
"""

from typing import Any

from site_cache.dto import ConfigEntry, parse_config_entry
from site_cache.logging import get_logger
from site_cache.protocols import ApiClient, CacheStore

from .config_service import ADMIN_CONFIG_KEY, PUBLIC_CONFIG_KEY
from .ordering import Entity, active_only, sort_by_order

logger = get_logger(__name__)


class QueryService:
    """Read queries through the cache store.

    Example:
        ```python
        queries = QueryService(store=store, client=client)

        testimonials = await queries.ordered("/api/admin/testimonials")
        maintenance = await queries.config("maintenance_mode", public=True)
        ```
    """

    def __init__(self, store: CacheStore, client: ApiClient) -> None:
        """Initialize the query service.

        Args:
            store: Cache store (required).
            client: Site API client (required).
        """
        self._store = store
        self._client = client

    async def fetch(self, query_key: str) -> Any:
        """Return the cached value, fetching it on first use."""
        entry = self._store.get_entry(query_key)
        if entry is not None:
            return entry.data

        response = await self._client.request("GET", query_key)

        # another read may have filled the key while this one was waiting
        if self._store.has(query_key):
            return self._store.get(query_key)
        return self._store.set(query_key, response.data)

    async def refetch(self, query_key: str, fresh: bool = False) -> Any:
        """Reload a query and overwrite the cached value.

        Args:
            query_key: The query to reload
            fresh: Also bypass the request cache
        """
        if fresh:
            self._client.invalidate(query_key)
        logger.info("Refetching %s", query_key)
        response = await self._client.request("GET", query_key)
        return self._store.set(query_key, response.data)

    def read(self, query_key: str) -> Any | None:
        """Cached value without any network call."""
        return self._store.get(query_key)

    async def ordered(self, query_key: str, only_active: bool = False) -> list[Entity]:
        """An entity list in display order, optionally restricted to active entities."""
        items = await self.fetch(query_key)
        if not isinstance(items, list):
            return []
        return active_only(items) if only_active else sort_by_order(items)

    async def config(self, key: str, public: bool = False) -> ConfigEntry | None:
        """Typed config entry by key, or None if the key is not stored."""
        configs = await self.fetch(PUBLIC_CONFIG_KEY if public else ADMIN_CONFIG_KEY)
        for raw in configs or []:
            if raw.get("key") == key:
                return parse_config_entry(raw)
        return None
