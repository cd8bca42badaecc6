"""
Comment repository interface.
"""

from abc import abstractmethod
from typing import List

from marketplace.domain.models.comment import Comment, CommentStatus
from marketplace.domain.repositories.base import MutableRepository, P


class CommentRepositoryInterface(MutableRepository[Comment, P]):
    """
    Repository interface for comments.
    """

    @abstractmethod
    async def find_for_entity(self, entity_id: str, include_hidden: bool = False) -> List[Comment]:
        """
        Find comments on a project or application, oldest first.
        Hidden comments are only returned when include_hidden is set.
        """
        pass

    @abstractmethod
    async def moderate(self, comment_id: str, status: CommentStatus) -> Comment:
        """
        Change a comment's moderation status.
        """
        pass
