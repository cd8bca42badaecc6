"""
Project DTOs for the application layer.
Data Transfer Objects for project-related operations.
"""

from typing import Any, Optional, List
from datetime import datetime
from pydantic import Field, field_validator, model_validator

from marketplace.domain.models.base import ensure_utc
from marketplace.domain.models.project import ProjectStatus, ProjectSearchCriteria
from .base_dto import RequestDTO, CreateRequestDTO, UpdateRequestDTO, AttachmentDTO


class CreateProjectRequestDTO(CreateRequestDTO):
    """DTO for posting a new project."""

    title: str = Field(min_length=1, max_length=200, description="Project title")
    description: str = Field(default="", max_length=5000, description="Project description")
    budget: float = Field(ge=0, description="Project budget")
    deadline: datetime = Field(description="Delivery deadline")
    category: Optional[str] = Field(default=None, max_length=100, description="Project category")
    tags: List[str] = Field(default_factory=list, description="Project tags")
    attachments: List[AttachmentDTO] = Field(default_factory=list, description="Attached files")

    @field_validator("deadline")
    @classmethod
    def deadline_as_utc(cls, v: datetime) -> datetime:
        """Naive deadlines are taken as UTC."""
        return ensure_utc(v)


class ProjectUpdateDTO(UpdateRequestDTO):
    """DTO for partial project updates."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    budget: Optional[float] = Field(default=None, ge=0)
    status: Optional[ProjectStatus] = None
    deadline: Optional[datetime] = None
    category: Optional[str] = Field(default=None, max_length=100)
    tags: Optional[List[str]] = None
    attachments: Optional[List[AttachmentDTO]] = None

    @field_validator("deadline")
    @classmethod
    def deadline_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v) if v is not None else v


class ProjectSearchDTO(RequestDTO):
    """DTO for project search and filter requests."""

    keyword: Optional[str] = Field(default=None, max_length=255, description="Search term")
    category: Optional[str] = None
    min_budget: Optional[float] = Field(default=None, ge=0)
    max_budget: Optional[float] = Field(default=None, ge=0)
    deadline_after: Optional[datetime] = None
    deadline_before: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    status: Optional[ProjectStatus] = None

    @field_validator("deadline_after", "deadline_before")
    @classmethod
    def bounds_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive bounds are taken as UTC so they compare with stored deadlines."""
        return ensure_utc(v) if v is not None else v

    @model_validator(mode="after")
    def validate_ranges(self):
        """Validate that ranges are not inverted."""
        if self.min_budget is not None and self.max_budget is not None \
                and self.min_budget > self.max_budget:
            raise ValueError("min_budget cannot exceed max_budget")
        if self.deadline_after and self.deadline_before \
                and self.deadline_after > self.deadline_before:
            raise ValueError("deadline_after must be before deadline_before")
        return self

    def to_criteria(self) -> ProjectSearchCriteria:
        return ProjectSearchCriteria(
            keyword=self.keyword,
            category=self.category,
            min_budget=self.min_budget,
            max_budget=self.max_budget,
            deadline_after=self.deadline_after,
            deadline_before=self.deadline_before,
            tags=list(self.tags),
            status=ProjectStatus(self.status) if self.status else None
        )


class ProjectPageRequestDTO(RequestDTO):
    """DTO for requesting one page of the project listing."""

    page_size: int = Field(default=10, ge=1, le=100, description="Items per page")
    cursor: Optional[Any] = Field(default=None, description="Last project of the previous page")
