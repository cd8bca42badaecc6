"""
Message, comment and notification update DTOs.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import Field

from marketplace.domain.models.comment import CommentStatus
from .base_dto import UpdateRequestDTO, AttachmentDTO


class MessageUpdateDTO(UpdateRequestDTO):
    """DTO for partial message updates."""

    content: Optional[str] = Field(default=None, min_length=1)
    attachments: Optional[List[AttachmentDTO]] = None
    read_at: Optional[datetime] = None


class CommentUpdateDTO(UpdateRequestDTO):
    """DTO for partial comment updates."""

    content: Optional[str] = Field(default=None, min_length=1)
    status: Optional[CommentStatus] = None
    attachments: Optional[List[AttachmentDTO]] = None


class NotificationUpdateDTO(UpdateRequestDTO):
    """DTO for partial notification updates."""

    message: Optional[str] = Field(default=None, min_length=1)
    read: Optional[bool] = None
