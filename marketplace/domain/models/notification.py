"""
Notification domain model.
"""

from dataclasses import dataclass
from enum import Enum

from marketplace.domain.models.base import BaseEntity, require_text


class NotificationType(str, Enum):
    """What a notification is about."""
    MESSAGE = "message"
    APPLICATION = "application"
    PROJECT = "project"
    SYSTEM = "system"


@dataclass
class Notification(BaseEntity):
    """An in-app notification addressed to one user."""

    user_id: str = ""
    type: NotificationType = NotificationType.SYSTEM
    message: str = ""
    read: bool = False

    def validate(self) -> None:
        require_text(self.user_id, "user_id", "Recipient id")
        require_text(self.message, "message", "Notification message")
