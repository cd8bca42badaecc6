"""
Message domain model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from marketplace.domain.models.base import BaseEntity, require_text
from marketplace.domain.models.attachment import Attachment


@dataclass
class Message(BaseEntity):
    """A direct message between two users."""

    sender_id: str = ""
    receiver_id: str = ""
    content: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    read_at: Optional[datetime] = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def validate(self) -> None:
        require_text(self.sender_id, "sender_id", "Sender id")
        require_text(self.receiver_id, "receiver_id", "Receiver id")
        require_text(self.content, "content", "Message content")
