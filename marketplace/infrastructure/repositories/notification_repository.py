"""
Notification repository backed by the notifications collection.
"""

from typing import List

from marketplace.application.dto.message_dto import NotificationUpdateDTO
from marketplace.domain.models.notification import Notification
from marketplace.domain.repositories.notification_repository import NotificationRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade
from marketplace.infrastructure.mappers.notification_mapper import NotificationMapper
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class NotificationRepository(
    MutableDocumentRepository[Notification, NotificationUpdateDTO],
    NotificationRepositoryInterface[NotificationUpdateDTO]
):
    """Document implementation of the notification repository."""

    collection = "notifications"
    entity_name = "Notification"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, NotificationMapper())

    async def find_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        filters = [("user_id", "==", user_id)]
        if unread_only:
            filters.append(("read", "==", False))
        return await self.find(filters, order_field="created_at", order_direction="desc")

    async def mark_read(self, notification_id: str) -> Notification:
        return await self.update(notification_id, NotificationUpdateDTO(read=True))
