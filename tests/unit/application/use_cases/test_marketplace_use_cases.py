"""
Unit tests for the dashboard and project use cases.
"""

import pytest
from datetime import datetime, timedelta, timezone

from marketplace.application.dto import (
    CreateProjectRequestDTO,
    DashboardRequestDTO,
    ProjectPageRequestDTO,
    ProjectSearchDTO,
    SubmitApplicationRequestDTO,
)
from marketplace.application.session_context import SessionContext
from marketplace.application.use_cases import (
    ApplyToProjectUseCase,
    CreateProjectUseCase,
    GetDashboardOverviewUseCase,
    ListProjectsPageUseCase,
    SearchProjectsUseCase,
)
from marketplace.domain.models import (
    ApplicationStatus,
    Identity,
    Project,
    ProjectStatus,
)
from marketplace.domain.services import IdentityProvider
from marketplace.infrastructure.db import DocumentFacade, InMemoryDocumentStore
from marketplace.infrastructure.repositories import (
    ActivityRepository,
    ApplicationRepository,
    ProjectRepository,
)


DEADLINE = datetime(2030, 6, 1, tzinfo=timezone.utc)


class StaticIdentityProvider(IdentityProvider):
    """Provider that always has the same signed-in user."""

    def __init__(self, identity):
        self.identity = identity

    async def sign_in_interactive(self):
        return self.identity

    async def sign_out(self):
        pass

    async def current_identity(self):
        return self.identity


@pytest.fixture
def facade():
    return DocumentFacade(InMemoryDocumentStore())


@pytest.fixture
def projects(facade):
    return ProjectRepository(facade)


@pytest.fixture
def activities(facade):
    return ActivityRepository(facade)


@pytest.fixture
def applications(facade):
    return ApplicationRepository(facade)


async def signed_in_session(uid="u1"):
    session = SessionContext(StaticIdentityProvider(Identity(uid=uid, email=f"{uid}@example.com")))
    await session.initialize()
    return session


def signed_out_session():
    return SessionContext(StaticIdentityProvider(None))


def create_request(**overrides):
    values = {"title": "Landing page", "description": "Bakery site", "budget": 400, "deadline": DEADLINE}
    values.update(overrides)
    return CreateProjectRequestDTO(**values)


class TestCreateProjectUseCase:
    """Test cases for CreateProjectUseCase."""

    @pytest.mark.asyncio
    async def test_creates_open_project_owned_by_user(self, projects, activities):
        """Test posting a project as the signed-in user."""
        use_case = CreateProjectUseCase(await signed_in_session("owner-1"), projects, activities)

        result = await use_case.execute(create_request())

        assert result.success is True
        assert result.data.status == ProjectStatus.OPEN
        assert result.data.created_by == "owner-1"
        assert await projects.get(result.data.id) is not None

        logged = await activities.recent()
        assert [(a.user_id, a.action) for a in logged] == [("owner-1", "create_project")]

    @pytest.mark.asyncio
    async def test_requires_authentication(self, projects, activities):
        """Test that anonymous users cannot post projects."""
        use_case = CreateProjectUseCase(signed_out_session(), projects, activities)

        result = await use_case.execute(create_request())

        assert result.success is False
        assert result.error_code == "AUTHENTICATION_REQUIRED"
        assert await projects.list_all() == []
        assert await activities.recent() == []


class TestApplyToProjectUseCase:
    """Test cases for ApplyToProjectUseCase."""

    async def _post(self, projects, **overrides):
        values = {"title": "API", "budget": 900, "created_by": "owner-1", "deadline": DEADLINE}
        values.update(overrides)
        return await projects.add(Project(**values))

    @pytest.mark.asyncio
    async def test_applies_to_open_project(self, projects, applications, activities):
        """Test submitting a proposal."""
        project = await self._post(projects)
        use_case = ApplyToProjectUseCase(await signed_in_session("dev-1"), projects, applications, activities)

        result = await use_case.execute(SubmitApplicationRequestDTO(project_id=project.id, proposal="Hire me"))

        assert result.success is True
        assert result.data.status == ApplicationStatus.PENDING
        assert result.data.user_id == "dev-1"
        assert result.data.submitted_at is not None
        assert [a.id for a in await applications.find_by_project(project.id)] == [result.data.id]
        assert [a.action for a in await activities.recent()] == ["apply_project"]

    @pytest.mark.asyncio
    async def test_missing_project(self, projects, applications, activities):
        """Test applying to a project that does not exist."""
        use_case = ApplyToProjectUseCase(await signed_in_session(), projects, applications, activities)

        result = await use_case.execute(SubmitApplicationRequestDTO(project_id="ghost", proposal="Hi"))

        assert result.success is False
        assert result.error_code == "ENTITY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_closed_project(self, projects, applications, activities):
        """Test that closed projects do not accept applications."""
        project = await self._post(projects, status=ProjectStatus.CLOSED)
        use_case = ApplyToProjectUseCase(await signed_in_session(), projects, applications, activities)

        result = await use_case.execute(SubmitApplicationRequestDTO(project_id=project.id, proposal="Hi"))

        assert result.success is False
        assert result.error_code == "BUSINESS_RULE_VIOLATION"
        assert await applications.list_all() == []


class TestListAndSearchProjects:
    """Test cases for listing and searching projects."""

    @pytest.mark.asyncio
    async def test_list_pages(self, projects):
        """Test walking the project listing page by page."""
        for i in range(5):
            await projects.add(Project(title=f"P{i}", created_by="o"))
        use_case = ListProjectsPageUseCase(projects)

        first = await use_case.execute(ProjectPageRequestDTO(page_size=3))
        second = await use_case.execute(ProjectPageRequestDTO(page_size=3, cursor=first.data.cursor))

        assert [p.title for p in first.data.items] == ["P4", "P3", "P2"]
        assert [p.title for p in second.data.items] == ["P1", "P0"]
        assert second.data.exhausted

    @pytest.mark.asyncio
    async def test_search(self, projects):
        """Test searching by keyword and status."""
        await projects.add(Project(title="Python API", created_by="o"))
        await projects.add(Project(title="Python script", created_by="o", status=ProjectStatus.CLOSED))
        use_case = SearchProjectsUseCase(projects)

        result = await use_case.execute(ProjectSearchDTO(keyword="python", status=ProjectStatus.OPEN))

        assert [p.title for p in result.data] == ["Python API"]


class TestGetDashboardOverviewUseCase:
    """Test cases for GetDashboardOverviewUseCase."""

    @pytest.mark.asyncio
    async def test_overview(self, facade, projects):
        """Test that the overview combines counters and recent activity."""
        await projects.add(Project(title="P", created_by="o"))
        await facade.add("users", {"uid": "u1"})
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(4):
            await facade.add("activities", {"user_id": "u1", "action": "login",
                                            "timestamp": base + timedelta(hours=i)})

        result = await GetDashboardOverviewUseCase(facade).execute(
            DashboardRequestDTO(recent_activities_limit=2)
        )

        assert result.success is True
        assert result.data.statistics.total_projects == 1
        assert result.data.statistics.total_freelancers == 1
        assert result.data.statistics.total_tasks_completed == 0
        assert [a.timestamp for a in result.data.recent_activities] == [
            base + timedelta(hours=3),
            base + timedelta(hours=2),
        ]
