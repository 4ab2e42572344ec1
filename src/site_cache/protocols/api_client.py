"""Site API client protocol.

Defines the interface the services use to talk to the REST-ish JSON
API of the site backend.
"""

from typing import Any, Protocol, runtime_checkable

from site_cache.entities import ApiResponseEntity


@runtime_checkable
class ApiClient(Protocol):
    """Protocol for site API clients."""

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any | None = None,
    ) -> ApiResponseEntity:
        """Perform one API call.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path relative to the API base URL
            body: Optional JSON-serializable request body

        Returns:
            The decoded response

        Raises:
            NetworkError: If the API cannot be reached
            ApiRequestError: If the API answers with a non-2xx status
        """
        ...

    def invalidate(self, endpoint: str) -> bool:
        """Forget any cached GET response for an endpoint.

        Args:
            endpoint: Path relative to the API base URL

        Returns:
            True if a cached response was dropped
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
