"""
Base DTOs for the application layer.
Provides common patterns for request data transfer objects and partial updates.
"""

from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from marketplace.domain.models.attachment import Attachment, AttachmentType


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Unknown fields (including id and timestamps) are rejected
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """
    Base class for partial update DTOs.
    Subclasses declare only mutable fields, so id, created_at and updated_at
    can never be part of a patch.
    """

    def to_patch(self) -> Dict[str, Any]:
        """Return only the fields the caller explicitly set."""
        return self.model_dump(exclude_unset=True)


class AttachmentDTO(BaseDTO):
    """DTO for an embedded attachment."""

    url: str = Field(min_length=1, description="Retrievable URL of the file")
    file_name: str = Field(min_length=1, max_length=255, description="Original file name")
    file_type: AttachmentType = Field(default=AttachmentType.OTHER, description="Media kind")
    uploaded_by: Optional[str] = Field(default=None, description="Uploader uid")
    uploaded_at: datetime = Field(description="Upload timestamp")
    path: Optional[str] = Field(default=None, description="Storage path")

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "AttachmentDTO":
        return cls(
            url=attachment.url,
            file_name=attachment.file_name,
            file_type=attachment.file_type,
            uploaded_by=attachment.uploaded_by,
            uploaded_at=attachment.uploaded_at,
            path=attachment.path
        )

    def to_attachment(self) -> Attachment:
        return Attachment(
            url=self.url,
            file_name=self.file_name,
            file_type=AttachmentType(self.file_type),
            uploaded_by=self.uploaded_by,
            uploaded_at=self.uploaded_at,
            path=self.path
        )
