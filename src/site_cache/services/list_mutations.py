"""Mutation pipeline for ordered entity collections.

One ``ListMutationService`` per admin collection (testimonials, FAQ
items, services, ...). Successful mutations write straight into the
cache store; nothing triggers a refetch.
"""

import asyncio
from collections.abc import Callable, Iterable
from typing import Any

from site_cache.dto import ReorderItem, normalize_reorder_items
from site_cache.entities import EntityUpdate
from site_cache.logging import get_logger
from site_cache.protocols import ApiClient, CacheStore

from .mutation import Mutation
from .ordering import Entity, apply_reorder, order_map, same_sequence, sort_by_order, sort_like

logger = get_logger(__name__)


def _is_entity_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, dict) and "id" in item for item in value)


class ListMutationService:
    """Create, update, delete and reorder mutations for one collection.

    The four mutations share a lock, so edits to one collection run
    one at a time in the order they were issued.

    Cache writes after success only touch a list that is already cached.
    A list that was never read is left for the next read, so a partial
    list never hides the full one.

    Example:
        ```python
        testimonials = ListMutationService(
            store=store,
            client=client,
            list_query_key="/api/admin/testimonials",
            entity_label="Testimonial",
            public_query_keys=["/api/testimonials"],
        )

        created = await testimonials.create({"name": "Ana", "order": 3})
        await testimonials.reorder([{"id": created["id"], "order": 0}])

        # Hook-style access for UI code
        testimonials.update_mutation.is_pending
        ```
    """

    def __init__(
        self,
        store: CacheStore,
        client: ApiClient,
        list_query_key: str,
        entity_label: str,
        public_query_keys: Iterable[str] = (),
    ) -> None:
        """Initialize the list mutation service.

        Args:
            store: Cache store holding the admin list (required).
            client: Site API client (required).
            list_query_key: Admin endpoint of the collection, also its query key.
            entity_label: Human-readable entity name for messages.
            public_query_keys: Public query keys evicted after a reorder.
        """
        self._store = store
        self._client = client
        self._list_query_key = list_query_key.rstrip("/")
        self._entity_label = entity_label
        self._public_query_keys = tuple(public_query_keys)
        self._lock = asyncio.Lock()

        self.create_mutation: Mutation[dict[str, Any], Entity] = Mutation(
            self._send_create,
            entity_label=entity_label,
            operation="create",
            on_success=self._created,
            lock=self._lock,
        )
        self.update_mutation: Mutation[EntityUpdate, Entity] = Mutation(
            self._send_update,
            entity_label=entity_label,
            operation="update",
            on_success=self._updated,
            lock=self._lock,
        )
        self.delete_mutation: Mutation[int, None] = Mutation(
            self._send_delete,
            entity_label=entity_label,
            operation="delete",
            on_success=self._deleted,
            lock=self._lock,
        )
        self.reorder_mutation: Mutation[list[ReorderItem], list[Entity]] = Mutation(
            self._send_reorder,
            entity_label=entity_label,
            operation="reorder",
            on_mutate=self._apply_optimistic_order,
            on_success=self._reordered,
            on_error=self._restore_snapshot,
            lock=self._lock,
        )

    # Operations

    async def create(self, data: dict[str, Any]) -> Entity:
        """Create an entity and add it to the cached list."""
        return await self.create_mutation.mutate(data)

    async def update(self, entity_id: int, data: dict[str, Any]) -> Entity:
        """Update an entity and replace it in the cached list."""
        return await self.update_mutation.mutate(EntityUpdate(id=entity_id, data=data))

    async def delete(self, entity_id: int) -> None:
        """Delete an entity and drop it from the cached list."""
        await self.delete_mutation.mutate(entity_id)

    async def reorder(self, items: Iterable[ReorderItem | dict[str, Any]]) -> list[Entity]:
        """Reorder the collection, showing the new order before the server answers.

        Args:
            items: New positions, only for entities that moved

        Returns:
            The cached list after confirmation

        Raises:
            MutationError: If the server call failed; the cached list is restored
        """
        return await self.reorder_mutation.mutate(normalize_reorder_items(items))

    # Network phase

    async def _send_create(self, data: dict[str, Any]) -> Any:
        response = await self._client.request("POST", self._list_query_key, data)
        return response.data

    async def _send_update(self, update: EntityUpdate) -> Any:
        response = await self._client.request("PUT", f"{self._list_query_key}/{update.id}", update.data)
        return response.data

    async def _send_delete(self, entity_id: int) -> Any:
        response = await self._client.request("DELETE", f"{self._list_query_key}/{entity_id}")
        return response.data

    async def _send_reorder(self, items: list[ReorderItem]) -> Any:
        logger.info("Reordering %d %s item(s)", len(items), self._entity_label)
        response = await self._client.request(
            "PUT",
            f"{self._list_query_key}/reorder",
            [item.model_dump() for item in items],
        )
        return response.data

    # Cache phases

    def _update_cached_list(self, change: Callable[[list[Entity]], list[Entity]]) -> None:
        if not self._store.has(self._list_query_key):
            logger.debug("%s not cached, skipping cache write", self._list_query_key)
            return
        self._store.set(
            self._list_query_key,
            lambda old: change(old if isinstance(old, list) else []),
        )

    def _created(self, entity: Entity, data: dict[str, Any], context: Any) -> Entity:
        self._update_cached_list(lambda items: sort_by_order([*items, entity]))
        return entity

    def _updated(self, response: Any, update: EntityUpdate, context: Any) -> Entity:
        def replace(items: list[Entity]) -> list[Entity]:
            replaced = []
            for item in items:
                if item.get("id") == update.id:
                    item = response if isinstance(response, dict) else {**item, **update.data}
                replaced.append(item)
            return replaced

        self._update_cached_list(replace)
        return response

    def _deleted(self, response: Any, entity_id: int, context: Any) -> None:
        self._update_cached_list(lambda items: [item for item in items if item.get("id") != entity_id])

    def _apply_optimistic_order(self, items: list[ReorderItem]) -> list[Entity] | None:
        previous = self._store.get(self._list_query_key)
        if not isinstance(previous, list):
            logger.warning("No cached %s list to reorder optimistically", self._entity_label)
            return None

        self._store.set(self._list_query_key, apply_reorder(previous, items))
        return previous

    def _restore_snapshot(self, error: BaseException, items: list[ReorderItem], previous: list[Entity] | None) -> bool:
        if previous is None:
            return False
        logger.warning("Reorder of %s failed, restoring previous order", self._entity_label)
        self._store.set(self._list_query_key, previous)
        return True

    def _reordered(self, response: Any, items: list[ReorderItem], previous: list[Entity] | None) -> list[Entity]:
        current = self._store.get(self._list_query_key)

        # the server agrees when every id carries the same order, whatever its tie order
        if _is_entity_list(response) and isinstance(current, list) and order_map(response) != order_map(current):
            confirmed = sort_like(response, current)
            if same_sequence(confirmed, current):
                logger.debug("Adopting server positions for %s", self._entity_label)
            else:
                logger.warning(
                    "Reorder of %s diverged from server: local %s, server %s",
                    self._entity_label,
                    [item.get("id") for item in current],
                    [item.get("id") for item in confirmed],
                )
            current = self._store.set(self._list_query_key, confirmed)

        for query_key in self._public_query_keys:
            self._store.remove(query_key)
            self._client.invalidate(query_key)

        return current if isinstance(current, list) else []

    @property
    def list_query_key(self) -> str:
        """Query key of the admin list."""
        return self._list_query_key

    @property
    def entity_label(self) -> str:
        """Human-readable entity name."""
        return self._entity_label

    @property
    def public_query_keys(self) -> tuple[str, ...]:
        """Public query keys evicted after a reorder."""
        return self._public_query_keys
