"""
Notification repository interface.
"""

from abc import abstractmethod
from typing import List

from marketplace.domain.models.notification import Notification
from marketplace.domain.repositories.base import MutableRepository, P


class NotificationRepositoryInterface(MutableRepository[Notification, P]):
    """
    Repository interface for notifications.
    """

    @abstractmethod
    async def find_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        """
        Find a user's notifications, newest first.
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: str) -> Notification:
        """
        Mark a notification as read.
        """
        pass
