"""
Activity repository interface.
The activity log is append-only, so there is no update or delete.
"""

from abc import abstractmethod
from typing import List, Optional

from marketplace.domain.models.activity import Activity, ActivityType
from marketplace.domain.repositories.base import Repository


class ActivityRepositoryInterface(Repository[Activity]):
    """
    Repository interface for the activity log.
    """

    @abstractmethod
    async def record(
        self,
        user_id: str,
        action: ActivityType | str,
        description: Optional[str] = None
    ) -> Activity:
        """
        Append an activity entry stamped with the current time.
        """
        pass

    @abstractmethod
    async def recent(self, limit: int = 10) -> List[Activity]:
        """
        Return the most recent entries, newest first.
        """
        pass
