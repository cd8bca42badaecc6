"""
User profile repository interface.
Defines the contract for user profile persistence operations.
"""

from abc import abstractmethod
from typing import List, Optional

from marketplace.domain.models.user import UserProfile, UserRole
from marketplace.domain.repositories.base import MutableRepository, P


class UserProfileRepositoryInterface(MutableRepository[UserProfile, P]):
    """
    Repository interface for user profiles.
    """

    @abstractmethod
    async def get_by_uid(self, uid: str) -> Optional[UserProfile]:
        """
        Find the profile belonging to an identity provider uid.
        """
        pass

    @abstractmethod
    async def find_by_role(self, role: UserRole) -> List[UserProfile]:
        """
        Find all profiles with a given role.
        """
        pass

    @abstractmethod
    async def set_role(self, profile_id: str, role: UserRole) -> UserProfile:
        """
        Change a user's platform role.
        """
        pass
