"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Services depend on these, so tests can hand in fakes and an
application can swap the HTTP client or the store.

Usage:
    ```python
    from site_cache.protocols import ApiClient, CacheStore

    store: CacheStore = InMemoryCacheStore()
    client: ApiClient = HttpApiClient.create()
    ```
"""

from .api_client import ApiClient
from .cache_store import CacheStore, Listener, Updater
from .notifier import Notifier

__all__ = [
    "ApiClient",
    "CacheStore",
    "Listener",
    "Notifier",
    "Updater",
]
