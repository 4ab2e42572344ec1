"""In-memory storage for the development backend.

Holds config entries by key and one collection of ordered entities per
resource. Ids are assigned from a single counter.
"""

import itertools
from collections.abc import Iterable
from typing import Any

from site_cache.dto import ReorderItem
from site_cache.exceptions import NotFoundError
from site_cache.services.ordering import Entity, active_only, apply_reorder, dense_ranking, sort_by_order

RESOURCES = (
    "testimonials",
    "faq",
    "services",
    "photo-carousel",
    "specialties",
    "articles",
    "custom-codes",
)


class SiteStorage:
    """Config entries and ordered collections kept in dicts."""

    def __init__(self, resources: Iterable[str] = RESOURCES) -> None:
        self._configs: dict[str, dict[str, Any]] = {}
        self._collections: dict[str, dict[int, Entity]] = {name: {} for name in resources}
        self._ids = itertools.count(1)

    # Config entries

    def list_configs(self) -> list[dict[str, Any]]:
        return list(self._configs.values())

    def set_config(self, key: str, value: Any) -> dict[str, Any]:
        entry = {"key": key, "value": value}
        self._configs[key] = entry
        return entry

    def delete_config(self, key: str) -> None:
        if self._configs.pop(key, None) is None:
            raise NotFoundError("Config", key)

    # Ordered collections

    @property
    def resources(self) -> list[str]:
        return list(self._collections)

    def _collection(self, resource: str) -> dict[int, Entity]:
        collection = self._collections.get(resource)
        if collection is None:
            raise NotFoundError("Resource", resource)
        return collection

    def list_items(self, resource: str, only_active: bool = False) -> list[Entity]:
        items = self._collection(resource).values()
        return active_only(items) if only_active else sort_by_order(items)

    def create_item(self, resource: str, data: dict[str, Any]) -> Entity:
        collection = self._collection(resource)
        item = {"order": 0, "isActive": True, **data, "id": next(self._ids)}
        collection[item["id"]] = item
        return item

    def update_item(self, resource: str, item_id: int, data: dict[str, Any]) -> Entity:
        collection = self._collection(resource)
        if item_id not in collection:
            raise NotFoundError(resource, item_id)
        item = {**collection[item_id], **data, "id": item_id}
        collection[item_id] = item
        return item

    def delete_item(self, resource: str, item_id: int) -> None:
        if self._collection(resource).pop(item_id, None) is None:
            raise NotFoundError(resource, item_id)

    def reorder_items(self, resource: str, items: list[ReorderItem]) -> list[Entity]:
        """Apply new positions, then store a contiguous 0..n-1 ranking.

        Returns:
            The whole collection in its new order
        """
        collection = self._collection(resource)
        ranked = dense_ranking(apply_reorder(collection.values(), items))
        for item in ranked:
            collection[item["id"]] = item
        return ranked
