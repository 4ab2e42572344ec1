"""Ordering policy shared by every ordered collection.

Entities are plain JSON dicts carrying an integer ``order`` (missing
reads as 0) and an ``isActive`` flag (missing reads as true). Display
order is ascending ``order``; equal values keep their input order.

None of these functions mutate their input. Entities whose ``order`` is
unchanged are passed through as the same objects.
"""

from collections.abc import Iterable
from typing import Any

from site_cache.dto import ReorderItem, normalize_reorder_items

Entity = dict[str, Any]


def order_of(entity: Entity) -> int:
    """Read an entity's position."""
    return entity.get("order") or 0


def sort_by_order(entities: Iterable[Entity]) -> list[Entity]:
    """Stable ascending sort on ``order``."""
    return sorted(entities, key=order_of)


def apply_reorder(
    entities: Iterable[Entity],
    items: Iterable[ReorderItem | dict[str, Any]],
) -> list[Entity]:
    """Apply new positions and return the list in display order.

    Entities not named in ``items`` keep their ``order``. When a moved
    entity lands on the same ``order`` as an unmoved one, the moved
    entity comes first.
    """
    new_orders = {item.id: item.order for item in normalize_reorder_items(items)}

    updated = []
    for entity in entities:
        new_order = new_orders.get(entity.get("id"))
        if new_order is not None and new_order != order_of(entity):
            entity = {**entity, "order": new_order}
        updated.append(entity)

    return sorted(updated, key=lambda e: (order_of(e), e.get("id") not in new_orders))


def active_only(entities: Iterable[Entity]) -> list[Entity]:
    """Entities shown on public pages, in display order.

    Sorting happens before filtering so positions do not depend on
    which subset is active.
    """
    return [entity for entity in sort_by_order(entities) if entity.get("isActive", True)]


def dense_ranking(entities: Iterable[Entity]) -> list[Entity]:
    """Renumber a list in display order as 0..n-1."""
    ranked = []
    for position, entity in enumerate(sort_by_order(entities)):
        if order_of(entity) != position or "order" not in entity:
            entity = {**entity, "order": position}
        ranked.append(entity)
    return ranked


def move_item(entities: Iterable[Entity], from_index: int, to_index: int) -> list[ReorderItem]:
    """Reorder items for a drag-and-drop move.

    Args:
        entities: The collection (any order; it is sorted first)
        from_index: Display position of the dragged entity
        to_index: Display position it is dropped on

    Returns:
        Reorder items for the entities whose position changed

    Raises:
        IndexError: If either index is out of range
    """
    ordered = sort_by_order(entities)
    if not (0 <= from_index < len(ordered) and 0 <= to_index < len(ordered)):
        raise IndexError(f"Cannot move item {from_index} to {to_index} in a list of {len(ordered)}")

    moved = ordered.pop(from_index)
    ordered.insert(to_index, moved)

    return [
        ReorderItem(id=entity["id"], order=position)
        for position, entity in enumerate(ordered)
        if order_of(entity) != position
    ]


def same_sequence(left: Iterable[Entity], right: Iterable[Entity]) -> bool:
    """True if both lists show the same ids in the same order."""
    return [e.get("id") for e in left] == [e.get("id") for e in right]


def order_map(entities: Iterable[Entity]) -> dict[Any, int]:
    """Map each id to its ``order``."""
    return {e.get("id"): order_of(e) for e in entities}


def sort_like(entities: Iterable[Entity], reference: Iterable[Entity]) -> list[Entity]:
    """Sort on ``order``, breaking ties by position in ``reference``.

    On equal ``order``, ids missing from ``reference`` come after known ones.
    """
    rank = {e.get("id"): index for index, e in enumerate(reference)}
    return sorted(entities, key=lambda e: (order_of(e), rank.get(e.get("id"), len(rank))))
