"""
Notification mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.notification import Notification, NotificationType
from marketplace.infrastructure.mappers.base import DocumentMapper


class NotificationMapper(DocumentMapper[Notification]):
    """Maps between Notification and its document in the notifications collection."""

    def to_document(self, notification: Notification) -> Dict[str, Any]:
        return {
            "user_id": notification.user_id,
            "type": notification.type.value,
            "message": notification.message,
            "read": notification.read
        }

    def _build(self, document: Dict[str, Any]) -> Notification:
        return Notification(
            user_id=document.get("user_id", ""),
            type=NotificationType(document.get("type") or NotificationType.SYSTEM.value),
            message=document.get("message", ""),
            read=bool(document.get("read", False))
        )
