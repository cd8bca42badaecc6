"""
Unit tests for marketplace domain models.
"""

import pytest

from marketplace.domain.models import (
    Activity,
    Attachment,
    AttachmentType,
    Message,
    Project,
    ProjectSearchCriteria,
    ProjectStatus,
    SocialLinks,
    UserProfile,
    ValidationError,
)


class TestProject:
    """Test cases for Project domain model."""

    def test_defaults(self):
        """Test a freshly built project."""
        project = Project(title="Logo", created_by="u1")

        assert project.status == ProjectStatus.OPEN
        assert project.is_open
        assert project.is_new
        assert project.tags == []

    def test_negative_budget(self):
        """Test that budgets cannot be negative."""
        with pytest.raises(ValidationError) as exc_info:
            Project(title="Logo", created_by="u1", budget=-5).validate()

        assert exc_info.value.field == "budget"

    def test_owner_required(self):
        """Test that a project needs an owner."""
        with pytest.raises(ValidationError):
            Project(title="Logo").validate()

    def test_to_dict_serializes_enums(self):
        """Test the plain dictionary form."""
        data = Project(title="Logo", created_by="u1", status=ProjectStatus.IN_PROGRESS).to_dict()

        assert data["status"] == "in-progress"
        assert data["id"] is None


class TestProjectSearchCriteria:
    """Test cases for ProjectSearchCriteria."""

    def test_inverted_budget(self):
        """Test budget range validation."""
        with pytest.raises(ValidationError):
            ProjectSearchCriteria(min_budget=10, max_budget=1).validate()


class TestAttachment:
    """Test cases for Attachment."""

    @pytest.mark.parametrize("content_type, expected", [
        ("image/png", AttachmentType.IMAGE),
        ("video/mp4", AttachmentType.VIDEO),
        ("application/pdf", AttachmentType.DOCUMENT),
        ("text/plain", AttachmentType.DOCUMENT),
        ("application/zip", AttachmentType.OTHER),
        (None, AttachmentType.OTHER),
    ])
    def test_type_from_content_type(self, content_type, expected):
        """Test MIME type classification."""
        assert AttachmentType.from_content_type(content_type) == expected

    def test_requires_url(self):
        """Test that attachments need a URL."""
        with pytest.raises(ValidationError):
            Attachment(url="", file_name="a.pdf").validate()


class TestUserProfile:
    """Test cases for UserProfile."""

    def test_social_links_drop_unset(self):
        """Test that only set links are serialized."""
        assert SocialLinks(github="https://github.com/ana").to_dict() == {"github": "https://github.com/ana"}

    def test_email_format(self):
        """Test email validation."""
        with pytest.raises(ValidationError):
            UserProfile(uid="u1", email="nope").validate()


class TestMessageAndActivity:
    """Test cases for Message and Activity."""

    def test_message_unread_by_default(self):
        """Test read tracking."""
        assert Message(sender_id="a", receiver_id="b", content="hi").is_read is False

    def test_activity_requires_action(self):
        """Test that activities need an action tag."""
        with pytest.raises(ValidationError):
            Activity(user_id="u1").validate()
