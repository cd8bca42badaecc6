"""
Project repository interface.
Defines the contract for project persistence operations.
"""

from abc import abstractmethod
from typing import Any, List

from marketplace.domain.models.project import Project, ProjectStatus, ProjectSearchCriteria
from marketplace.domain.repositories.base import MutableRepository, P


class ProjectRepositoryInterface(MutableRepository[Project, P]):
    """
    Repository interface for projects.
    """

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> List[Project]:
        """
        Find all projects posted by a user, newest first.
        """
        pass

    @abstractmethod
    async def find_open(self, limit: int = 20) -> List[Project]:
        """
        Find open projects, newest first.
        """
        pass

    @abstractmethod
    async def search(self, criteria: ProjectSearchCriteria) -> List[Project]:
        """
        Find projects matching search criteria.
        """
        pass

    @abstractmethod
    async def paginate(self, page_size: int = 10, cursor: Any = None) -> Any:
        """
        Fetch one page of projects ordered by creation time, newest first.
        """
        pass

    @abstractmethod
    async def set_status(self, project_id: str, status: ProjectStatus) -> Project:
        """
        Change a project's status.
        """
        pass
