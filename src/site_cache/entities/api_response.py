"""API response domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ApiResponseEntity:
    """Decoded response from the site API.

    Attributes:
        status_code: HTTP status (200 for responses served from the request cache)
        data: Decoded JSON body, or None for an empty body
        from_cache: True if synthesized from the request cache without a network call
    """

    status_code: int
    data: Any
    from_cache: bool = False

    def json(self) -> Any:
        """Return the decoded body."""
        return self.data
