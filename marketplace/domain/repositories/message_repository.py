"""
Message repository interface.
"""

from abc import abstractmethod
from typing import List

from marketplace.domain.models.message import Message
from marketplace.domain.repositories.base import MutableRepository, P


class MessageRepositoryInterface(MutableRepository[Message, P]):
    """
    Repository interface for direct messages.
    """

    @abstractmethod
    async def find_conversation(self, user_a: str, user_b: str) -> List[Message]:
        """
        Find messages exchanged between two users in either direction, oldest first.
        """
        pass

    @abstractmethod
    async def find_unread(self, receiver_id: str) -> List[Message]:
        """
        Find messages a user has not read yet.
        """
        pass

    @abstractmethod
    async def mark_read(self, message_id: str) -> Message:
        """
        Stamp a message as read.
        """
        pass
