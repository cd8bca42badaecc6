"""
Comment domain model.
Comments attach to a project or an application by id.
"""

from dataclasses import dataclass, field
from typing import List
from enum import Enum

from marketplace.domain.models.base import BaseEntity, require_text
from marketplace.domain.models.attachment import Attachment


class CommentStatus(str, Enum):
    """Moderation status of a comment."""
    VISIBLE = "visible"
    HIDDEN = "hidden"
    FLAGGED = "flagged"


@dataclass
class Comment(BaseEntity):
    """Comment entity."""

    entity_id: str = ""
    author_id: str = ""
    content: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    status: CommentStatus = CommentStatus.VISIBLE

    def validate(self) -> None:
        require_text(self.entity_id, "entity_id", "Target entity id")
        require_text(self.author_id, "author_id", "Author id")
        require_text(self.content, "content", "Comment content")
