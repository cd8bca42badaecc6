"""
Comment mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.comment import Comment, CommentStatus
from marketplace.infrastructure.mappers.base import (
    DocumentMapper,
    attachments_from_documents,
    attachments_to_documents,
)


class CommentMapper(DocumentMapper[Comment]):
    """Maps between Comment and its document in the comments collection."""

    def to_document(self, comment: Comment) -> Dict[str, Any]:
        return {
            "entity_id": comment.entity_id,
            "author_id": comment.author_id,
            "content": comment.content,
            "attachments": attachments_to_documents(comment.attachments),
            "status": comment.status.value
        }

    def _build(self, document: Dict[str, Any]) -> Comment:
        return Comment(
            entity_id=document.get("entity_id", ""),
            author_id=document.get("author_id", ""),
            content=document.get("content", ""),
            attachments=attachments_from_documents(document.get("attachments")),
            status=CommentStatus(document.get("status") or CommentStatus.VISIBLE.value)
        )
