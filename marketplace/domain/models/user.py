"""
User profile domain model.
Represents a marketplace member's public profile.
"""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum

from marketplace.domain.models.base import BaseEntity, ValidationError, require_text


class UserRole(str, Enum):
    """Platform-wide user roles."""
    ADMIN = "admin"
    USER = "user"


@dataclass
class SocialLinks:
    """Optional links to a user's external profiles."""

    linkedin: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, dropping unset links."""
        return {
            key: value
            for key, value in {
                "linkedin": self.linkedin,
                "github": self.github,
                "twitter": self.twitter,
                "website": self.website
            }.items()
            if value is not None
        }


@dataclass
class UserProfile(BaseEntity):
    """
    User profile entity.
    The uid is the identity provider's user id; the document id is assigned by the store.
    """

    uid: str = ""
    email: str = ""
    display_name: str = ""
    role: UserRole = UserRole.USER
    skills: List[str] = field(default_factory=list)
    portfolio: List[str] = field(default_factory=list)
    social_links: Optional[SocialLinks] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def validate(self) -> None:
        require_text(self.uid, "uid", "User uid")
        require_text(self.email, "email", "Email")
        if "@" not in self.email:
            raise ValidationError(f"Invalid email format: {self.email}", "email")
