"""Repository layer for data access.

This layer holds the concrete implementations behind the protocols:
the in-memory cache store, the httpx API client with its request
cache, and the in-memory notifier.

The repositories are protocol-based (structural typing), not
inheritance-based. Any class implementing the required methods will
satisfy the protocol.
"""

from site_cache.protocols import ApiClient, CacheStore, Notifier

from .http_api_client import HttpApiClient
from .memory_cache_store import InMemoryCacheStore
from .memory_notifier import InMemoryNotifier
from .request_cache import RequestCache

__all__ = [
    "ApiClient",
    "CacheStore",
    "Notifier",
    "HttpApiClient",
    "InMemoryCacheStore",
    "InMemoryNotifier",
    "RequestCache",
]
