"""
Project use cases.
Listing, searching, posting and applying to projects.
"""

import logging
from typing import List

from marketplace.application.dto.application_dto import SubmitApplicationRequestDTO
from marketplace.application.dto.project_dto import (
    CreateProjectRequestDTO,
    ProjectPageRequestDTO,
    ProjectSearchDTO,
)
from marketplace.application.session_context import SessionContext
from marketplace.domain.models.activity import ActivityType
from marketplace.domain.models.application import Application, ApplicationStatus
from marketplace.domain.models.base import BusinessRuleViolation, EntityNotFoundError, utc_now
from marketplace.domain.models.project import Project, ProjectStatus
from marketplace.domain.repositories.activity_repository import ActivityRepositoryInterface
from marketplace.domain.repositories.application_repository import ApplicationRepositoryInterface
from marketplace.domain.repositories.project_repository import ProjectRepositoryInterface
from marketplace.infrastructure.pagination import CursorPage
from .base_use_case import AuthenticatedUseCase, QueryUseCase


logger = logging.getLogger(__name__)


class ListProjectsPageUseCase(QueryUseCase[ProjectPageRequestDTO, CursorPage[Project]]):
    """Use case for fetching one page of projects, newest first."""

    def __init__(self, project_repository: ProjectRepositoryInterface):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: ProjectPageRequestDTO) -> CursorPage[Project]:
        return await self.project_repository.paginate(request.page_size, request.cursor)


class SearchProjectsUseCase(QueryUseCase[ProjectSearchDTO, List[Project]]):
    """Use case for searching and filtering projects."""

    def __init__(self, project_repository: ProjectRepositoryInterface):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: ProjectSearchDTO) -> List[Project]:
        return await self.project_repository.search(request.to_criteria())


class CreateProjectUseCase(AuthenticatedUseCase[CreateProjectRequestDTO, Project]):
    """Use case for posting a new project as the signed-in user."""

    def __init__(
        self,
        session: SessionContext,
        project_repository: ProjectRepositoryInterface,
        activity_repository: ActivityRepositoryInterface
    ):
        super().__init__(session)
        self.project_repository = project_repository
        self.activity_repository = activity_repository

    async def _execute_business_logic(self, request: CreateProjectRequestDTO) -> Project:
        identity = self._require_identity()

        project = Project(
            title=request.title,
            description=request.description,
            budget=request.budget,
            status=ProjectStatus.OPEN,
            created_by=identity.uid,
            deadline=request.deadline,
            category=request.category,
            tags=list(request.tags),
            attachments=[attachment.to_attachment() for attachment in request.attachments]
        )
        created = await self.project_repository.add(project)

        await self.activity_repository.record(
            identity.uid,
            ActivityType.CREATE_PROJECT,
            f"Posted project '{created.title}'"
        )
        logger.info(f"Project {created.id} created by {identity.uid}")
        return created


class ApplyToProjectUseCase(AuthenticatedUseCase[SubmitApplicationRequestDTO, Application]):
    """Use case for submitting a proposal to an open project."""

    def __init__(
        self,
        session: SessionContext,
        project_repository: ProjectRepositoryInterface,
        application_repository: ApplicationRepositoryInterface,
        activity_repository: ActivityRepositoryInterface
    ):
        super().__init__(session)
        self.project_repository = project_repository
        self.application_repository = application_repository
        self.activity_repository = activity_repository

    async def _execute_business_logic(self, request: SubmitApplicationRequestDTO) -> Application:
        identity = self._require_identity()

        project = await self.project_repository.get(request.project_id)
        if project is None:
            raise EntityNotFoundError("Project", request.project_id)
        if not project.is_open:
            raise BusinessRuleViolation(f"Project '{project.title}' is not accepting applications")

        application = Application(
            project_id=project.id,
            user_id=identity.uid,
            proposal=request.proposal,
            attachments=[attachment.to_attachment() for attachment in request.attachments],
            status=ApplicationStatus.PENDING,
            submitted_at=utc_now()
        )
        created = await self.application_repository.add(application)

        await self.activity_repository.record(
            identity.uid,
            ActivityType.APPLY_PROJECT,
            f"Applied to project '{project.title}'"
        )
        logger.info(f"Application {created.id} submitted to project {project.id}")
        return created
