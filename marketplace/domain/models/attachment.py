"""
Attachment value object.
Attachments are embedded in the entity that owns them and never stored on their own.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from enum import Enum

from marketplace.domain.models.base import utc_now, require_text


class AttachmentType(str, Enum):
    """Media kind of an attachment."""
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    OTHER = "other"

    @classmethod
    def from_content_type(cls, content_type: Optional[str]) -> "AttachmentType":
        """Derive the attachment kind from a MIME type."""
        if not content_type:
            return cls.OTHER
        if content_type.startswith("image/"):
            return cls.IMAGE
        if content_type.startswith("video/"):
            return cls.VIDEO
        if content_type == "application/pdf" or content_type.startswith("text/") \
                or "document" in content_type or content_type == "application/msword":
            return cls.DOCUMENT
        return cls.OTHER


@dataclass
class Attachment:
    """A file uploaded to object storage and referenced by URL."""

    url: str
    file_name: str
    file_type: AttachmentType = AttachmentType.OTHER
    uploaded_by: Optional[str] = None
    uploaded_at: datetime = field(default_factory=utc_now)
    path: Optional[str] = None

    def validate(self) -> None:
        require_text(self.url, "url", "Attachment URL")
        require_text(self.file_name, "file_name", "Attachment file name")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "file_name": self.file_name,
            "file_type": self.file_type.value,
            "uploaded_by": self.uploaded_by,
            "uploaded_at": self.uploaded_at.isoformat(),
            "path": self.path
        }
