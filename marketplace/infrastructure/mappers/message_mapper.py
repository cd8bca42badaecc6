"""
Message mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.message import Message
from marketplace.infrastructure.mappers.base import (
    DocumentMapper,
    attachments_from_documents,
    attachments_to_documents,
    parse_datetime,
)


class MessageMapper(DocumentMapper[Message]):
    """Maps between Message and its document in the messages collection."""

    def to_document(self, message: Message) -> Dict[str, Any]:
        return {
            "sender_id": message.sender_id,
            "receiver_id": message.receiver_id,
            "content": message.content,
            "attachments": attachments_to_documents(message.attachments),
            "read_at": message.read_at
        }

    def _build(self, document: Dict[str, Any]) -> Message:
        return Message(
            sender_id=document.get("sender_id", ""),
            receiver_id=document.get("receiver_id", ""),
            content=document.get("content", ""),
            attachments=attachments_from_documents(document.get("attachments")),
            read_at=parse_datetime(document.get("read_at"))
        )
