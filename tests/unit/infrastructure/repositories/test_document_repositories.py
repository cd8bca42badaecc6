"""
Unit tests for the document-backed typed repositories.
"""

import pytest
from datetime import datetime, timedelta, timezone

from marketplace.application.dto import (
    ProjectSearchDTO,
    ProjectUpdateDTO,
    UserProfileUpdateDTO,
)
from marketplace.domain.models import (
    ActivityType,
    Application,
    ApplicationStatus,
    Comment,
    CommentStatus,
    DocumentNotFoundError,
    Message,
    Notification,
    Project,
    ProjectSearchCriteria,
    ProjectStatus,
    UserProfile,
    UserRole,
    ValidationError,
)
from marketplace.infrastructure.db import DocumentFacade, InMemoryDocumentStore
from marketplace.infrastructure.repositories import (
    ActivityRepository,
    ApplicationRepository,
    CommentRepository,
    MessageRepository,
    NotificationRepository,
    ProjectRepository,
    UserProfileRepository,
)


DEADLINE = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def facade():
    return DocumentFacade(InMemoryDocumentStore())


def make_project(**overrides):
    values = {
        "title": "Landing page",
        "description": "Marketing site for a bakery",
        "budget": 500.0,
        "created_by": "owner-1",
        "deadline": DEADLINE,
        "category": "web",
        "tags": ["design", "web"],
    }
    values.update(overrides)
    return Project(**values)


class TestProjectRepository:
    """Test cases for ProjectRepository."""

    @pytest.mark.asyncio
    async def test_add_returns_stored_project(self, facade):
        """Test that add fills in id and timestamps."""
        repo = ProjectRepository(facade)

        project = await repo.add(make_project())

        assert project.id is not None
        assert project.created_at is not None
        assert project.created_at == project.updated_at
        assert project.status == ProjectStatus.OPEN
        assert project.deadline == DEADLINE

    @pytest.mark.asyncio
    async def test_add_validates_entity(self, facade):
        """Test that invalid projects are never written."""
        repo = ProjectRepository(facade)

        with pytest.raises(ValidationError):
            await repo.add(make_project(title="  "))

        assert await repo.list_all() == []

    @pytest.mark.asyncio
    async def test_update_applies_only_set_fields(self, facade):
        """Test partial updates through the patch DTO."""
        repo = ProjectRepository(facade)
        project = await repo.add(make_project())

        updated = await repo.update(project.id, ProjectUpdateDTO(budget=750))

        assert updated.budget == 750
        assert updated.title == project.title
        assert updated.updated_at > project.updated_at

    @pytest.mark.asyncio
    async def test_set_status(self, facade):
        """Test changing project status."""
        repo = ProjectRepository(facade)
        project = await repo.add(make_project())

        closed = await repo.set_status(project.id, ProjectStatus.CLOSED)

        assert closed.status == ProjectStatus.CLOSED
        assert closed.is_open is False

    @pytest.mark.asyncio
    async def test_find_open_and_by_owner(self, facade):
        """Test the status and owner lookups."""
        repo = ProjectRepository(facade)
        await repo.add(make_project(title="A"))
        await repo.add(make_project(title="B", status=ProjectStatus.CLOSED))
        await repo.add(make_project(title="C", created_by="owner-2"))

        open_titles = [p.title for p in await repo.find_open()]
        owned_titles = [p.title for p in await repo.find_by_owner("owner-1")]

        assert open_titles == ["C", "A"]
        assert owned_titles == ["B", "A"]

    @pytest.mark.asyncio
    async def test_search_combines_criteria_and_keyword(self, facade):
        """Test search by budget range, tags and keyword."""
        repo = ProjectRepository(facade)
        await repo.add(make_project(title="Bakery site", budget=400, tags=["web"]))
        await repo.add(make_project(title="Mobile game", budget=5000, tags=["mobile"]))
        await repo.add(make_project(title="Blog theme", budget=300, tags=["design"], description="WordPress"))

        by_budget = await repo.search(ProjectSearchCriteria(min_budget=350, max_budget=1000))
        by_tag = await repo.search(ProjectSearchCriteria(tags=["design", "mobile"]))
        by_keyword = await repo.search(ProjectSearchCriteria(keyword="wordpress"))

        assert [p.title for p in by_budget] == ["Bakery site"]
        assert sorted(p.title for p in by_tag) == ["Blog theme", "Mobile game"]
        assert [p.title for p in by_keyword] == ["Blog theme"]

    @pytest.mark.asyncio
    async def test_search_by_deadline_window(self, facade):
        """Test filtering on deadline bounds."""
        repo = ProjectRepository(facade)
        await repo.add(make_project(title="Soon", deadline=DEADLINE))
        await repo.add(make_project(title="Later", deadline=DEADLINE + timedelta(days=60)))

        results = await repo.search(ProjectSearchCriteria(deadline_before=DEADLINE + timedelta(days=1)))

        assert [p.title for p in results] == ["Soon"]

    @pytest.mark.asyncio
    async def test_search_with_naive_deadline_bound(self, facade):
        """Test that a naive bound from a search request matches stored UTC deadlines."""
        repo = ProjectRepository(facade)
        await repo.add(make_project(title="Summer", deadline=datetime(2025, 6, 1, tzinfo=timezone.utc)))

        criteria = ProjectSearchDTO(deadline_after="2024-01-01T00:00:00").to_criteria()
        from_dto = await repo.search(criteria)
        from_naive = await repo.search(ProjectSearchCriteria(deadline_after=datetime(2024, 1, 1)))

        assert [p.title for p in from_dto] == ["Summer"]
        assert [p.title for p in from_naive] == ["Summer"]

    @pytest.mark.asyncio
    async def test_search_rejects_inverted_budget(self, facade):
        """Test that an inverted budget range is rejected."""
        repo = ProjectRepository(facade)

        with pytest.raises(ValidationError):
            await repo.search(ProjectSearchCriteria(min_budget=10, max_budget=5))

    @pytest.mark.asyncio
    async def test_paginate_yields_entities(self, facade):
        """Test that pagination works with entity cursors."""
        repo = ProjectRepository(facade)
        for i in range(3):
            await repo.add(make_project(title=f"P{i}"))

        first = await repo.paginate(page_size=2)
        second = await repo.paginate(page_size=2, cursor=first.cursor)

        assert [p.title for p in first.items] == ["P2", "P1"]
        assert isinstance(first.cursor, Project)
        assert [p.title for p in second.items] == ["P0"]
        assert second.cursor is None

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, facade):
        """Test that updating a missing project fails."""
        repo = ProjectRepository(facade)

        with pytest.raises(DocumentNotFoundError):
            await repo.update("ghost", ProjectUpdateDTO(title="X"))

    @pytest.mark.asyncio
    async def test_delete(self, facade):
        """Test deleting a project."""
        repo = ProjectRepository(facade)
        project = await repo.add(make_project())

        await repo.delete(project.id)

        assert await repo.get(project.id) is None


class TestUserProfileRepository:
    """Test cases for UserProfileRepository."""

    @pytest.mark.asyncio
    async def test_get_by_uid_and_role(self, facade):
        """Test lookups by identity uid and role."""
        repo = UserProfileRepository(facade)
        await repo.add(UserProfile(uid="u1", email="ana@example.com", display_name="Ana"))
        await repo.add(UserProfile(uid="u2", email="bo@example.com", role=UserRole.ADMIN))

        profile = await repo.get_by_uid("u1")
        admins = await repo.find_by_role(UserRole.ADMIN)

        assert profile.display_name == "Ana"
        assert [a.uid for a in admins] == ["u2"]
        assert await repo.get_by_uid("nobody") is None

    @pytest.mark.asyncio
    async def test_set_role_and_profile_update(self, facade):
        """Test role changes and profile edits."""
        repo = UserProfileRepository(facade)
        profile = await repo.add(UserProfile(uid="u1", email="ana@example.com"))

        promoted = await repo.set_role(profile.id, UserRole.ADMIN)
        edited = await repo.update(profile.id, UserProfileUpdateDTO(skills=["python", "sql"]))

        assert promoted.is_admin
        assert edited.skills == ["python", "sql"]
        assert edited.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, facade):
        """Test that profiles need a valid email."""
        repo = UserProfileRepository(facade)

        with pytest.raises(ValidationError):
            await repo.add(UserProfile(uid="u1", email="not-an-email"))


class TestApplicationRepository:
    """Test cases for ApplicationRepository."""

    @pytest.mark.asyncio
    async def test_find_and_set_status(self, facade):
        """Test application lookups and status changes."""
        repo = ApplicationRepository(facade)
        first = await repo.add(Application(project_id="p1", user_id="u1", proposal="I can do it"))
        await repo.add(Application(project_id="p2", user_id="u1", proposal="Me too"))

        by_project = await repo.find_by_project("p1")
        by_applicant = await repo.find_by_applicant("u1")
        accepted = await repo.set_status(first.id, ApplicationStatus.ACCEPTED)

        assert [a.id for a in by_project] == [first.id]
        assert len(by_applicant) == 2
        assert accepted.status == ApplicationStatus.ACCEPTED


class TestMessageRepository:
    """Test cases for MessageRepository."""

    @pytest.mark.asyncio
    async def test_conversation_and_unread(self, facade):
        """Test reading a two-way conversation and marking messages read."""
        repo = MessageRepository(facade)
        hello = await repo.add(Message(sender_id="a", receiver_id="b", content="Hello"))
        await repo.add(Message(sender_id="b", receiver_id="a", content="Hi"))
        await repo.add(Message(sender_id="c", receiver_id="b", content="Unrelated"))

        conversation = await repo.find_conversation("a", "b")
        unread_before = await repo.find_unread("b")
        marked = await repo.mark_read(hello.id)
        unread_after = await repo.find_unread("b")

        assert [m.content for m in conversation] == ["Hello", "Hi"]
        assert len(unread_before) == 2
        assert marked.is_read
        assert [m.content for m in unread_after] == ["Unrelated"]


class TestCommentRepository:
    """Test cases for CommentRepository."""

    @pytest.mark.asyncio
    async def test_hidden_comments_excluded_by_default(self, facade):
        """Test that moderation hides comments from the default listing."""
        repo = CommentRepository(facade)
        keep = await repo.add(Comment(entity_id="p1", author_id="u1", content="Nice"))
        spam = await repo.add(Comment(entity_id="p1", author_id="u2", content="Buy now"))

        await repo.moderate(spam.id, CommentStatus.HIDDEN)

        visible = await repo.find_for_entity("p1")
        everything = await repo.find_for_entity("p1", include_hidden=True)

        assert [c.id for c in visible] == [keep.id]
        assert len(everything) == 2


class TestActivityRepository:
    """Test cases for ActivityRepository."""

    @pytest.mark.asyncio
    async def test_record_and_recent(self, facade):
        """Test recording activities and reading the newest ones."""
        repo = ActivityRepository(facade)
        await repo.record("u1", ActivityType.LOGIN)
        await repo.record("u1", "custom_action", "Something else")

        recent = await repo.recent(limit=1)
        everything = await repo.recent()

        assert len(recent) == 1
        assert len(everything) == 2
        assert {a.action for a in everything} == {"login", "custom_action"}

    def test_activity_log_cannot_be_updated(self, facade):
        """Test that the activity repository exposes no update or delete."""
        repo = ActivityRepository(facade)

        assert not hasattr(repo, "update")
        assert not hasattr(repo, "delete")


class TestNotificationRepository:
    """Test cases for NotificationRepository."""

    @pytest.mark.asyncio
    async def test_unread_only_and_mark_read(self, facade):
        """Test filtering unread notifications."""
        repo = NotificationRepository(facade)
        first = await repo.add(Notification(user_id="u1", message="New application"))
        await repo.add(Notification(user_id="u1", message="New message"))

        await repo.mark_read(first.id)

        unread = await repo.find_for_user("u1", unread_only=True)
        everything = await repo.find_for_user("u1")

        assert [n.message for n in unread] == ["New message"]
        assert len(everything) == 2
