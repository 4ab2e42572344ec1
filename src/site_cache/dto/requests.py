"""Request DTOs for API endpoints."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field


class ReorderItem(BaseModel):
    """One entry of a reorder request: an entity id and its new position."""

    id: int = Field(..., description="Server-assigned entity id")
    order: int = Field(..., description="New display position (ascending)")


class ConfigUpsertRequest(BaseModel):
    """Request DTO for creating or replacing a config entry."""

    key: str = Field(..., description="Config key naming one site section", min_length=1)
    value: Any = Field(None, description="JSON payload owned by the section")


def normalize_reorder_items(items: Iterable[ReorderItem | dict[str, Any]]) -> list[ReorderItem]:
    """Accept ReorderItem models or plain {id, order} dicts."""
    return [
        item if isinstance(item, ReorderItem) else ReorderItem.model_validate(item)
        for item in items
    ]
