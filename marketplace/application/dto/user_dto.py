"""
User profile DTOs for the application layer.
"""

from typing import Optional, List
from pydantic import Field

from marketplace.domain.models.user import UserRole
from .base_dto import BaseDTO, UpdateRequestDTO


class SocialLinksDTO(BaseDTO):
    """DTO for a user's social links."""

    linkedin: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    website: Optional[str] = None


class UserProfileUpdateDTO(UpdateRequestDTO):
    """DTO for profile edits."""

    display_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    skills: Optional[List[str]] = None
    portfolio: Optional[List[str]] = None
    social_links: Optional[SocialLinksDTO] = None


class UserRoleUpdateDTO(UpdateRequestDTO):
    """DTO for an administrator changing a user's role."""

    role: UserRole
