"""Notification domain entity."""

from dataclasses import dataclass
from typing import Literal

NotificationVariant = Literal["default", "destructive"]


@dataclass(frozen=True)
class NotificationEntity:
    """A dismissable message shown to the admin user.

    Attributes:
        id: Identifier used to dismiss the notification
        title: Short headline
        description: Optional detail line
        variant: "destructive" for failures, "default" otherwise
    """

    id: int
    title: str
    description: str = ""
    variant: NotificationVariant = "default"
