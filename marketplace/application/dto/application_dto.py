"""
Application DTOs for the application layer.
"""

from typing import Optional, List
from pydantic import Field

from marketplace.domain.models.application import ApplicationStatus
from .base_dto import CreateRequestDTO, UpdateRequestDTO, AttachmentDTO


class SubmitApplicationRequestDTO(CreateRequestDTO):
    """DTO for applying to a project."""

    project_id: str = Field(min_length=1, description="Project being applied to")
    proposal: str = Field(min_length=1, max_length=5000, description="Proposal text")
    attachments: List[AttachmentDTO] = Field(default_factory=list)


class ApplicationUpdateDTO(UpdateRequestDTO):
    """DTO for partial application updates."""

    proposal: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    status: Optional[ApplicationStatus] = None
    attachments: Optional[List[AttachmentDTO]] = None
