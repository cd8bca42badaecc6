"""
Activity mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.activity import Activity
from marketplace.domain.models.base import utc_now
from marketplace.infrastructure.mappers.base import DocumentMapper, parse_datetime


class ActivityMapper(DocumentMapper[Activity]):
    """Maps between Activity and its document in the activities collection."""

    def to_document(self, activity: Activity) -> Dict[str, Any]:
        return {
            "user_id": activity.user_id,
            "action": activity.action,
            "description": activity.description,
            "timestamp": activity.timestamp
        }

    def _build(self, document: Dict[str, Any]) -> Activity:
        return Activity(
            user_id=document.get("user_id", ""),
            action=document.get("action", ""),
            description=document.get("description"),
            timestamp=parse_datetime(document.get("timestamp")) or utc_now()
        )
