"""
Application repository backed by the applications collection.
"""

from typing import List

from marketplace.application.dto.application_dto import ApplicationUpdateDTO
from marketplace.domain.models.application import Application, ApplicationStatus
from marketplace.domain.repositories.application_repository import ApplicationRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade
from marketplace.infrastructure.mappers.application_mapper import ApplicationMapper
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class ApplicationRepository(
    MutableDocumentRepository[Application, ApplicationUpdateDTO],
    ApplicationRepositoryInterface[ApplicationUpdateDTO]
):
    """Document implementation of the application repository."""

    collection = "applications"
    entity_name = "Application"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, ApplicationMapper())

    async def find_by_project(self, project_id: str) -> List[Application]:
        return await self.find(
            [("project_id", "==", project_id)],
            order_field="created_at"
        )

    async def find_by_applicant(self, user_id: str) -> List[Application]:
        return await self.find(
            [("user_id", "==", user_id)],
            order_field="created_at",
            order_direction="desc"
        )

    async def set_status(self, application_id: str, status: ApplicationStatus) -> Application:
        return await self.update(application_id, ApplicationUpdateDTO(status=status))
