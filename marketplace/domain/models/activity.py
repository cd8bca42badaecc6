"""
Activity log domain model.
Activities are append-only: once recorded they are never updated or deleted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from enum import Enum

from marketplace.domain.models.base import BaseEntity, utc_now, require_text


class ActivityType(str, Enum):
    """Known activity tags. Other free-form tags are accepted as plain strings."""
    LOGIN = "login"
    LOGOUT = "logout"
    CREATE_PROJECT = "create_project"
    APPLY_PROJECT = "apply_project"
    COMMENT = "comment"
    UPDATE_PROFILE = "update_profile"


@dataclass
class Activity(BaseEntity):
    """Activity log entry."""

    user_id: str = ""
    action: str = ""
    description: Optional[str] = None
    timestamp: datetime = field(default_factory=utc_now)

    def validate(self) -> None:
        require_text(self.user_id, "user_id", "Actor id")
        require_text(self.action, "action", "Activity action")
