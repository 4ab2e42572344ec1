"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .api_response import ApiResponseEntity
from .cache_entry import CacheEntryEntity
from .entity_update import EntityUpdate
from .notification import NotificationEntity

__all__ = ["ApiResponseEntity", "CacheEntryEntity", "EntityUpdate", "NotificationEntity"]
