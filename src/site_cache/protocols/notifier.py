"""Notifier protocol.

Defines how mutation outcomes reach the admin user as dismissable
status messages.
"""

from typing import Protocol, runtime_checkable

from site_cache.entities import NotificationEntity
from site_cache.entities.notification import NotificationVariant


@runtime_checkable
class Notifier(Protocol):
    """Protocol for user-facing notification sinks."""

    def notify(
        self,
        title: str,
        description: str = "",
        variant: NotificationVariant = "default",
    ) -> NotificationEntity:
        """Show a notification.

        Args:
            title: Short headline
            description: Optional detail line
            variant: "destructive" for failures

        Returns:
            The notification shown
        """
        ...

    def dismiss(self, notification_id: int) -> bool:
        """Dismiss a notification.

        Args:
            notification_id: The id returned by notify()

        Returns:
            True if it was still visible, False otherwise
        """
        ...
