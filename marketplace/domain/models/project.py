"""
Project domain model.
Represents a job posted on the marketplace that freelancers can apply to.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List
from enum import Enum

from marketplace.domain.models.base import BaseEntity, ValidationError, require_text
from marketplace.domain.models.attachment import Attachment


class ProjectStatus(str, Enum):
    """Project status."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    CLOSED = "closed"
    COMPLETED = "completed"


@dataclass
class Project(BaseEntity):
    """
    Project entity.
    created_by holds the uid of the posting user.
    """

    title: str = ""
    description: str = ""
    budget: float = 0.0
    status: ProjectStatus = ProjectStatus.OPEN
    created_by: str = ""
    deadline: Optional[datetime] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    attachments: List[Attachment] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.status == ProjectStatus.OPEN

    def validate(self) -> None:
        require_text(self.title, "title", "Project title")
        require_text(self.created_by, "created_by", "Project owner")
        if self.budget < 0:
            raise ValidationError("Budget cannot be negative", "budget")
        for attachment in self.attachments:
            attachment.validate()


@dataclass
class ProjectSearchCriteria:
    """Search and filter criteria for project listings."""

    keyword: Optional[str] = None
    category: Optional[str] = None
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    deadline_after: Optional[datetime] = None
    deadline_before: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    status: Optional[ProjectStatus] = None

    def validate(self) -> None:
        if self.min_budget is not None and self.max_budget is not None \
                and self.min_budget > self.max_budget:
            raise ValidationError("min_budget cannot exceed max_budget", "min_budget")
        if self.deadline_after and self.deadline_before \
                and self.deadline_after > self.deadline_before:
            raise ValidationError("deadline_after must be before deadline_before", "deadline_after")
