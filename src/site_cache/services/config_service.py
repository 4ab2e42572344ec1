"""Config service for site section settings.

Config entries are upserted by key: saving a key that does not exist
yet creates it. The cached admin and public config lists are patched
in place of a refetch.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from site_cache.dto import ConfigEntry, ConfigUpsertRequest, parse_config_entry, validate_config_value
from site_cache.logging import get_logger
from site_cache.protocols import ApiClient, CacheStore

from .mutation import Mutation

logger = get_logger(__name__)

ADMIN_CONFIG_KEY = "/api/admin/config"
PUBLIC_CONFIG_KEY = "/api/config"


class ConfigService:
    """Save and delete config entries against the cached admin config list.

    Example:
        ```python
        configs = ConfigService(store=store, client=client)

        await configs.upsert("faq_section", {"badge": "FAQ", "title": "Questions"})
        configs.get("faq_section").value.title  # "Questions"

        await configs.delete("hero_image")
        ```
    """

    def __init__(self, store: CacheStore, client: ApiClient) -> None:
        """Initialize the config service.

        Args:
            store: Cache store holding the admin config list (required).
            client: Site API client (required).
        """
        self._store = store
        self._client = client
        self._lock = asyncio.Lock()

        self.upsert_mutation: Mutation[ConfigUpsertRequest, dict[str, Any]] = Mutation(
            self._send_upsert,
            entity_label="settings",
            operation="save",
            on_success=self._upserted,
            lock=self._lock,
        )
        self.delete_mutation: Mutation[str, None] = Mutation(
            self._send_delete,
            entity_label="settings",
            operation="delete",
            on_success=self._deleted,
            lock=self._lock,
        )

    async def upsert(self, key: str, value: Any) -> dict[str, Any]:
        """Create or replace a config entry.

        Known keys are validated and completed with defaults first.

        Args:
            key: Config key
            value: Section payload

        Returns:
            The stored {key, value} entry

        Raises:
            InvalidConfigError: If the value does not fit the key (nothing is sent)
            MutationError: If the server call failed
        """
        request = ConfigUpsertRequest(key=key, value=validate_config_value(key, value))
        return await self.upsert_mutation.mutate(request)

    async def delete(self, key: str) -> None:
        """Delete a config entry.

        Raises:
            MutationError: If the server call failed
        """
        await self.delete_mutation.mutate(key)

    def get(self, key: str) -> ConfigEntry | None:
        """Typed entry for a key from the cached admin list, or None."""
        for raw in self._cached_configs():
            if raw.get("key") == key:
                return parse_config_entry(raw)
        return None

    def _cached_configs(self) -> list[dict[str, Any]]:
        configs = self._store.get(ADMIN_CONFIG_KEY)
        return configs if isinstance(configs, list) else []

    async def _send_upsert(self, request: ConfigUpsertRequest) -> Any:
        response = await self._client.request("POST", ADMIN_CONFIG_KEY, request.model_dump())
        return response.data

    async def _send_delete(self, key: str) -> Any:
        response = await self._client.request("DELETE", f"{ADMIN_CONFIG_KEY}/{key}")
        return response.data

    def _patch_cached_configs(self, change: Callable[[list[dict[str, Any]]], list[dict[str, Any]]]) -> None:
        # public pages read the same entries
        for query_key in (ADMIN_CONFIG_KEY, PUBLIC_CONFIG_KEY):
            if self._store.has(query_key):
                self._store.set(query_key, lambda old: change(old if isinstance(old, list) else []))
        self._client.invalidate(PUBLIC_CONFIG_KEY)

    def _upserted(self, response: Any, request: ConfigUpsertRequest, context: Any) -> dict[str, Any]:
        if isinstance(response, dict) and response.get("key") == request.key:
            entry = response
        else:
            entry = {"key": request.key, "value": request.value}

        def merge(configs: list[dict[str, Any]]) -> list[dict[str, Any]]:
            for index, config in enumerate(configs):
                if config.get("key") == request.key:
                    return [*configs[:index], {**config, **entry}, *configs[index + 1 :]]
            return [*configs, entry]

        self._patch_cached_configs(merge)
        logger.info("Config saved: %s", request.key)
        return entry

    def _deleted(self, response: Any, key: str, context: Any) -> None:
        self._patch_cached_configs(lambda configs: [c for c in configs if c.get("key") != key])
        logger.info("Config deleted: %s", key)
