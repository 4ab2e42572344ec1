"""Site Cache - cache synchronization and optimistic updates for the site admin.

This package keeps the admin dashboard's view of the site configuration
and ordered collections consistent with the site API, without refetches:

Layers:
    - protocols: Interface contracts (CacheStore, ApiClient, Notifier)
    - repositories: Implementations (in-memory store, httpx client, request cache)
    - services: Business logic (queries, mutation pipeline, ordering policy)
    - handlers: User-facing notifications for mutation outcomes
    - dto: Data transfer objects (API contracts, typed config values)
    - entities: Domain models (internal)

Usage:
    ```python
    from site_cache.repositories import HttpApiClient, InMemoryCacheStore
    from site_cache.services import ListMutationService, QueryService

    store = InMemoryCacheStore()
    client = HttpApiClient.create()

    queries = QueryService(store=store, client=client)
    await queries.fetch("/api/admin/testimonials")

    testimonials = ListMutationService(
        store, client, "/api/admin/testimonials", "Testimonial", ["/api/testimonials"]
    )
    await testimonials.reorder([{"id": 3, "order": 0}])
    ```

For the development backend:
    ```python
    from site_cache.api.app import app
    ```
"""

from site_cache.config import get_http_client, settings
from site_cache.dto import ConfigUpsertRequest, ReorderItem
from site_cache.entities import ApiResponseEntity, CacheEntryEntity, EntityUpdate, NotificationEntity
from site_cache.exceptions import (
    ApiRequestError,
    InvalidConfigError,
    MutationError,
    NetworkError,
    NotFoundError,
    SiteCacheError,
)
from site_cache.handlers import ConfigHandler, ManagerHandler
from site_cache.protocols import ApiClient, CacheStore, Notifier
from site_cache.repositories import HttpApiClient, InMemoryCacheStore, InMemoryNotifier, RequestCache
from site_cache.services import ConfigService, ListMutationService, Mutation, QueryService

__all__ = [
    # Configuration
    "settings",
    "get_http_client",
    # Protocols (interfaces)
    "ApiClient",
    "CacheStore",
    "Notifier",
    # Services (business logic)
    "ConfigService",
    "ListMutationService",
    "Mutation",
    "QueryService",
    # Handlers (UI)
    "ConfigHandler",
    "ManagerHandler",
    # Repositories
    "HttpApiClient",
    "InMemoryCacheStore",
    "InMemoryNotifier",
    "RequestCache",
    # Entities (domain models)
    "ApiResponseEntity",
    "CacheEntryEntity",
    "EntityUpdate",
    "NotificationEntity",
    # DTOs (API contracts)
    "ConfigUpsertRequest",
    "ReorderItem",
    # Errors
    "SiteCacheError",
    "NetworkError",
    "ApiRequestError",
    "MutationError",
    "InvalidConfigError",
    "NotFoundError",
]
