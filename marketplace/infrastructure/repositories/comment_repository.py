"""
Comment repository backed by the comments collection.
"""

from typing import List

from marketplace.application.dto.message_dto import CommentUpdateDTO
from marketplace.domain.models.comment import Comment, CommentStatus
from marketplace.domain.repositories.comment_repository import CommentRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade
from marketplace.infrastructure.mappers.comment_mapper import CommentMapper
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class CommentRepository(
    MutableDocumentRepository[Comment, CommentUpdateDTO],
    CommentRepositoryInterface[CommentUpdateDTO]
):
    """Document implementation of the comment repository."""

    collection = "comments"
    entity_name = "Comment"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, CommentMapper())

    async def find_for_entity(self, entity_id: str, include_hidden: bool = False) -> List[Comment]:
        filters = [("entity_id", "==", entity_id)]
        if not include_hidden:
            filters.append(("status", "!=", CommentStatus.HIDDEN.value))
        return await self.find(filters, order_field="created_at")

    async def moderate(self, comment_id: str, status: CommentStatus) -> Comment:
        return await self.update(comment_id, CommentUpdateDTO(status=status))
