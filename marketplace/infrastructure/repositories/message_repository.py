"""
Message repository backed by the messages collection.
"""

from typing import List

from marketplace.application.dto.message_dto import MessageUpdateDTO
from marketplace.domain.models.base import utc_now
from marketplace.domain.models.message import Message
from marketplace.domain.repositories.message_repository import MessageRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade
from marketplace.infrastructure.mappers.message_mapper import MessageMapper
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class MessageRepository(
    MutableDocumentRepository[Message, MessageUpdateDTO],
    MessageRepositoryInterface[MessageUpdateDTO]
):
    """Document implementation of the message repository."""

    collection = "messages"
    entity_name = "Message"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, MessageMapper())

    async def find_conversation(self, user_a: str, user_b: str) -> List[Message]:
        # The store only AND-combines filters, so each direction is one query
        sent = await self.find([("sender_id", "==", user_a), ("receiver_id", "==", user_b)])
        received = await self.find([("sender_id", "==", user_b), ("receiver_id", "==", user_a)])
        return sorted(sent + received, key=lambda message: message.created_at)

    async def find_unread(self, receiver_id: str) -> List[Message]:
        return await self.find(
            [("receiver_id", "==", receiver_id), ("read_at", "==", None)],
            order_field="created_at"
        )

    async def mark_read(self, message_id: str) -> Message:
        return await self.update(message_id, MessageUpdateDTO(read_at=utc_now()))
