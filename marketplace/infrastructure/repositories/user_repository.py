"""
User profile repository backed by the users collection.
"""

from typing import List, Optional

from marketplace.application.dto.user_dto import UserProfileUpdateDTO, UserRoleUpdateDTO
from marketplace.domain.models.user import UserProfile, UserRole
from marketplace.domain.repositories.user_repository import UserProfileRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade, USERS
from marketplace.infrastructure.mappers.user_mapper import UserProfileMapper
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class UserProfileRepository(
    MutableDocumentRepository[UserProfile, UserProfileUpdateDTO],
    UserProfileRepositoryInterface[UserProfileUpdateDTO]
):
    """Document implementation of the user profile repository."""

    collection = USERS
    entity_name = "UserProfile"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, UserProfileMapper())

    async def get_by_uid(self, uid: str) -> Optional[UserProfile]:
        profiles = await self.find([("uid", "==", uid)], limit=1)
        return profiles[0] if profiles else None

    async def find_by_role(self, role: UserRole) -> List[UserProfile]:
        return await self.find([("role", "==", UserRole(role).value)])

    async def set_role(self, profile_id: str, role: UserRole) -> UserProfile:
        await self.facade.update(
            self.collection,
            profile_id,
            UserRoleUpdateDTO(role=role).to_patch()
        )
        return await self._require(profile_id)
