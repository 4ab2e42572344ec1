"""In-memory implementation of Notifier.

Keeps the notifications currently visible to the admin user, the way a
toast queue does in the dashboard.
"""

import itertools

from site_cache.entities import NotificationEntity
from site_cache.entities.notification import NotificationVariant
from site_cache.logging import get_logger

logger = get_logger(__name__)


class InMemoryNotifier:
    """Collects notifications until they are dismissed.

    This class satisfies the Notifier protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, limit: int | None = None) -> None:
        """Initialize the notifier.

        Args:
            limit: Maximum visible notifications. The oldest is dropped
                when a new one would exceed it. None means unbounded.
        """
        self._limit = limit
        self._ids = itertools.count(1)
        self._active: list[NotificationEntity] = []

    def notify(
        self,
        title: str,
        description: str = "",
        variant: NotificationVariant = "default",
    ) -> NotificationEntity:
        notification = NotificationEntity(
            id=next(self._ids),
            title=title,
            description=description,
            variant=variant,
        )
        self._active.append(notification)
        if self._limit is not None and len(self._active) > self._limit:
            self._active.pop(0)

        if variant == "destructive":
            logger.warning("Notification: %s - %s", title, description)
        else:
            logger.info("Notification: %s", title)
        return notification

    def dismiss(self, notification_id: int) -> bool:
        for index, notification in enumerate(self._active):
            if notification.id == notification_id:
                del self._active[index]
                return True
        return False

    @property
    def active(self) -> list[NotificationEntity]:
        """Visible notifications, oldest first."""
        return list(self._active)
