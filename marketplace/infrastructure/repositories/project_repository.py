"""
Project repository backed by the projects collection.
"""

from typing import Any, List

from marketplace.application.dto.project_dto import ProjectUpdateDTO
from marketplace.domain.models.project import Project, ProjectStatus, ProjectSearchCriteria
from marketplace.domain.repositories.project_repository import ProjectRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade, PROJECTS
from marketplace.infrastructure.mappers.project_mapper import ProjectMapper
from marketplace.infrastructure.pagination import CursorPage
from marketplace.infrastructure.repositories.base import MutableDocumentRepository


class ProjectRepository(
    MutableDocumentRepository[Project, ProjectUpdateDTO],
    ProjectRepositoryInterface[ProjectUpdateDTO]
):
    """Document implementation of the project repository."""

    collection = PROJECTS
    entity_name = "Project"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, ProjectMapper())

    async def find_by_owner(self, owner_id: str) -> List[Project]:
        return await self.find(
            [("created_by", "==", owner_id)],
            order_field="created_at",
            order_direction="desc"
        )

    async def find_open(self, limit: int = 20) -> List[Project]:
        return await self.find(
            [("status", "==", ProjectStatus.OPEN.value)],
            order_field="created_at",
            order_direction="desc",
            limit=limit
        )

    async def search(self, criteria: ProjectSearchCriteria) -> List[Project]:
        """
        Find projects matching the criteria.
        Structured criteria run in the store; the keyword is matched against
        title and description after fetching.
        """
        criteria.validate()
        filters = []
        if criteria.status:
            filters.append(("status", "==", ProjectStatus(criteria.status).value))
        if criteria.category:
            filters.append(("category", "==", criteria.category))
        if criteria.min_budget is not None:
            filters.append(("budget", ">=", criteria.min_budget))
        if criteria.max_budget is not None:
            filters.append(("budget", "<=", criteria.max_budget))
        if criteria.deadline_after is not None:
            filters.append(("deadline", ">=", criteria.deadline_after))
        if criteria.deadline_before is not None:
            filters.append(("deadline", "<=", criteria.deadline_before))
        if criteria.tags:
            filters.append(("tags", "array-contains-any", list(criteria.tags)))

        projects = await self.find(filters, order_field="created_at", order_direction="desc")

        if criteria.keyword and criteria.keyword.strip():
            keyword = criteria.keyword.strip().lower()
            projects = [
                project for project in projects
                if keyword in project.title.lower() or keyword in project.description.lower()
            ]
        return projects

    async def paginate(self, page_size: int = 10, cursor: Any = None) -> CursorPage[Project]:
        page = await self.facade.get_projects_with_pagination(page_size=page_size, cursor=cursor)
        return page.map(self.mapper.to_entity)

    async def set_status(self, project_id: str, status: ProjectStatus) -> Project:
        return await self.update(project_id, ProjectUpdateDTO(status=status))
