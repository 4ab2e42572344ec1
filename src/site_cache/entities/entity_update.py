"""Update mutation input."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EntityUpdate:
    """Input for an update mutation: the entity id and the fields to send."""

    id: int
    data: dict[str, Any] = field(default_factory=dict)
