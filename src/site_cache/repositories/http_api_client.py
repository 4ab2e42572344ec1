"""httpx-based implementation of ApiClient.

Talks to the site backend's REST-ish JSON API.

Key features:
- GET responses are cached for a short freshness window
- Identical GET requests issued while one is in flight share its result
- Non-GET requests always reach the network and are never cached
- Transport failures and non-2xx statuses raise typed errors
"""

import asyncio
import json
from typing import Any

import httpx

from site_cache.config import get_http_client, settings
from site_cache.entities import ApiResponseEntity
from site_cache.exceptions import ApiRequestError, NetworkError
from site_cache.logging import get_logger

from .request_cache import RequestCache

logger = get_logger(__name__)


class HttpApiClient:
    """httpx implementation of the ApiClient protocol.

    This class satisfies the ApiClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = HttpApiClient.create(base_url="http://localhost:5000")

        response = await client.request("GET", "/api/config")
        configs = response.json()

        await client.request("POST", "/api/admin/config", {"key": "faq_section", "value": {...}})
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        request_cache: RequestCache | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Site API base URL. Defaults to settings.api_base_url.
            client: httpx client to use. If None, one is created on first use.
            request_cache: GET response cache. If None, creates default.
            timeout: Request timeout in seconds. Defaults to settings.
        """
        self._base_url = (settings.api_base_url if base_url is None else base_url).rstrip("/")
        self._client = client
        self._timeout = timeout
        self._request_cache = RequestCache() if request_cache is None else request_cache
        self._in_flight: dict[str, asyncio.Future[ApiResponseEntity]] = {}

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        ttl: int | None = None,
        max_entries: int | None = None,
    ) -> "HttpApiClient":
        """Factory method to create HttpApiClient with defaults.

        Args:
            base_url: Site API URL. If None, uses settings.
            ttl: Request cache freshness in seconds. If None, uses settings.
            max_entries: Request cache ceiling. If None, uses settings.

        Returns:
            Configured HttpApiClient
        """
        return cls(
            base_url=base_url,
            request_cache=RequestCache(ttl=ttl, max_entries=max_entries),
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = get_http_client(self._timeout)
        return self._client

    @staticmethod
    def cache_key(method: str, url: str, body: Any | None = None) -> str:
        """Build the request cache key from method, URL and body."""
        key = f"{method}:{url}"
        if body is not None:
            key += ":" + json.dumps(body, sort_keys=True)
        return key

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any | None = None,
    ) -> ApiResponseEntity:
        """Perform one API call.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path relative to the base URL
            body: Optional JSON-serializable request body

        Returns:
            The decoded response

        Raises:
            NetworkError: If the API cannot be reached
            ApiRequestError: If the API answers with a non-2xx status
        """
        method = method.upper()
        url = f"{self._base_url}{endpoint}"

        if method != "GET":
            return await self._send(method, url, body)

        key = self.cache_key(method, url, body)

        cached = self._request_cache.get(key)
        if cached is not None:
            return ApiResponseEntity(status_code=200, data=cached.data, from_cache=True)

        pending = self._in_flight.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(key, method, url, body))
            self._in_flight[key] = pending
        else:
            logger.debug("Joining in-flight request: %s", key)

        # shield: a cancelled caller must not cancel the request other callers share
        return await asyncio.shield(pending)

    async def _fetch(self, key: str, method: str, url: str, body: Any | None) -> ApiResponseEntity:
        try:
            response = await self._send(method, url, body)
            self._request_cache.set(key, response.data)
            return response
        finally:
            self._in_flight.pop(key, None)

    async def _send(self, method: str, url: str, body: Any | None) -> ApiResponseEntity:
        logger.debug("%s %s", method, url)
        try:
            response = await self.client.request(
                method,
                url,
                json=body,
                headers={"Content-Type": "application/json", "Cache-Control": "max-age=60"},
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise NetworkError(method, url, str(e) or type(e).__name__) from e

        if response.is_error:
            logger.error("%s %s returned HTTP %d", method, url, response.status_code)
            raise ApiRequestError(method, url, response.status_code, response.text)

        return ApiResponseEntity(status_code=response.status_code, data=self._decode(response))

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def invalidate(self, endpoint: str) -> bool:
        """Forget the cached GET response for an endpoint.

        Args:
            endpoint: Path relative to the base URL

        Returns:
            True if a cached response was dropped
        """
        dropped = self._request_cache.delete(self.cache_key("GET", f"{self._base_url}{endpoint}"))
        if dropped:
            logger.info("Request cache entry invalidated: %s", endpoint)
        return dropped

    def clear_request_cache(self) -> int:
        """Drop every cached GET response.

        Returns:
            Number of entries removed
        """
        return self._request_cache.clear()

    @property
    def request_cache(self) -> RequestCache:
        """Get the underlying request cache (for testing)."""
        return self._request_cache

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._base_url

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
