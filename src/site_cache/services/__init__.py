"""Service layer for business logic.

Services depend on protocols (CacheStore, ApiClient), not concrete
implementations, making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (UI)    -> (Cache sync) -> (Store / HTTP)

Usage:
    ```python
    from site_cache.repositories import HttpApiClient, InMemoryCacheStore
    from site_cache.services import ListMutationService, QueryService

    store = InMemoryCacheStore()
    client = HttpApiClient.create()

    queries = QueryService(store=store, client=client)
    faq = ListMutationService(store, client, "/api/admin/faq", "FAQ item", ["/api/faq"])
    ```
"""

from .config_service import ADMIN_CONFIG_KEY, PUBLIC_CONFIG_KEY, ConfigService
from .list_mutations import ListMutationService
from .mutation import Mutation
from .ordering import active_only, apply_reorder, dense_ranking, move_item, sort_by_order
from .query_service import QueryService

__all__ = [
    "ADMIN_CONFIG_KEY",
    "PUBLIC_CONFIG_KEY",
    "ConfigService",
    "ListMutationService",
    "Mutation",
    "QueryService",
    "active_only",
    "apply_reorder",
    "dense_ranking",
    "move_item",
    "sort_by_order",
]
