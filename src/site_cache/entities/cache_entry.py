"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for one cached value.

    Used both by the cache store (keyed by query key) and by the
    request cache (keyed by method, URL and body).

    Attributes:
        query_key: The identifier the value is stored under
        data: The cached JSON value
        timestamp: When the value was written (epoch milliseconds)
    """

    query_key: str
    data: Any
    timestamp: int
