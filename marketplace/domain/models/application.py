"""
Application domain model.
A freelancer's proposal for a project.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from enum import Enum

from marketplace.domain.models.base import BaseEntity, require_text
from marketplace.domain.models.attachment import Attachment


class ApplicationStatus(str, Enum):
    """Application review status."""
    PENDING = "pending"
    UNDER_REVIEW = "under-review"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class Application(BaseEntity):
    """Application entity."""

    project_id: str = ""
    user_id: str = ""
    proposal: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    status: ApplicationStatus = ApplicationStatus.PENDING
    submitted_at: Optional[datetime] = None

    def validate(self) -> None:
        require_text(self.project_id, "project_id", "Project id")
        require_text(self.user_id, "user_id", "Applicant id")
        require_text(self.proposal, "proposal", "Proposal")
