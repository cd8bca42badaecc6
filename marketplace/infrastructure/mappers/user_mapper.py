"""
User profile mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.user import UserProfile, UserRole, SocialLinks
from marketplace.infrastructure.mappers.base import DocumentMapper


class UserProfileMapper(DocumentMapper[UserProfile]):
    """Maps between UserProfile and its document in the users collection."""

    def to_document(self, profile: UserProfile) -> Dict[str, Any]:
        return {
            "uid": profile.uid,
            "email": profile.email,
            "display_name": profile.display_name,
            "role": profile.role.value,
            "skills": list(profile.skills),
            "portfolio": list(profile.portfolio),
            "social_links": profile.social_links.to_dict() if profile.social_links else None
        }

    def _build(self, document: Dict[str, Any]) -> UserProfile:
        links = document.get("social_links")
        return UserProfile(
            uid=document.get("uid", ""),
            email=document.get("email", ""),
            display_name=document.get("display_name", ""),
            role=UserRole(document.get("role") or UserRole.USER.value),
            skills=list(document.get("skills") or []),
            portfolio=list(document.get("portfolio") or []),
            social_links=SocialLinks(**links) if links else None
        )
