"""
Application repository interface.
"""

from abc import abstractmethod
from typing import List

from marketplace.domain.models.application import Application, ApplicationStatus
from marketplace.domain.repositories.base import MutableRepository, P


class ApplicationRepositoryInterface(MutableRepository[Application, P]):
    """
    Repository interface for project applications.
    """

    @abstractmethod
    async def find_by_project(self, project_id: str) -> List[Application]:
        """
        Find all applications submitted for a project.
        """
        pass

    @abstractmethod
    async def find_by_applicant(self, user_id: str) -> List[Application]:
        """
        Find all applications submitted by a user.
        """
        pass

    @abstractmethod
    async def set_status(self, application_id: str, status: ApplicationStatus) -> Application:
        """
        Change an application's review status.
        """
        pass
