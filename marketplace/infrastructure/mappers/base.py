"""
Shared helpers for converting between documents and domain entities.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from marketplace.domain.models.attachment import Attachment, AttachmentType
from marketplace.domain.models.base import BaseEntity, ensure_utc, utc_now

E = TypeVar('E', bound=BaseEntity)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse a stored timestamp (datetime or ISO-8601 string) into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    return ensure_utc(datetime.fromisoformat(str(value).replace("Z", "+00:00")))


def attachments_to_documents(attachments: List[Attachment]) -> List[Dict[str, Any]]:
    return [
        {
            "url": attachment.url,
            "file_name": attachment.file_name,
            "file_type": attachment.file_type.value,
            "uploaded_by": attachment.uploaded_by,
            "uploaded_at": attachment.uploaded_at,
            "path": attachment.path
        }
        for attachment in attachments
    ]


def attachments_from_documents(documents: Optional[List[Dict[str, Any]]]) -> List[Attachment]:
    attachments = []
    for document in documents or []:
        file_type = document.get("file_type") or AttachmentType.OTHER.value
        attachments.append(Attachment(
            url=document.get("url", ""),
            file_name=document.get("file_name", ""),
            file_type=AttachmentType(file_type),
            uploaded_by=document.get("uploaded_by"),
            uploaded_at=parse_datetime(document.get("uploaded_at")) or utc_now(),
            path=document.get("path")
        ))
    return attachments


class DocumentMapper(ABC, Generic[E]):
    """Maps between a domain entity and its stored document."""

    @abstractmethod
    def to_document(self, entity: E) -> Dict[str, Any]:
        """Convert an entity into document fields, without id or timestamps."""
        pass

    @abstractmethod
    def _build(self, document: Dict[str, Any]) -> E:
        """Build the entity from its own document fields."""
        pass

    def to_entity(self, document: Dict[str, Any]) -> E:
        """Convert a stored document into an entity with id and timestamps set."""
        entity = self._build(document)
        entity.id = document.get("id")
        entity.created_at = parse_datetime(document.get("created_at"))
        entity.updated_at = parse_datetime(document.get("updated_at"))
        return entity
