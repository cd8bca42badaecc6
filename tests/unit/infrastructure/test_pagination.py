"""
Unit tests for cursor pagination helpers.
"""

import pytest
from datetime import datetime, timezone

from marketplace.domain.models.base import ValidationError
from marketplace.domain.models.project import Project
from marketplace.infrastructure.pagination import CursorPage, CursorPagination


class TestCursorPagination:
    """Test cases for CursorPagination."""

    def test_full_page_sets_cursor_to_last_item(self):
        """Test that a full page carries a cursor."""
        paginator = CursorPagination(page_size=2)

        page = paginator.build_page(["a", "b"])

        assert page.cursor == "b"
        assert page.has_next is True

    def test_short_page_is_exhausted(self):
        """Test that a short page has no cursor."""
        paginator = CursorPagination(page_size=3)

        page = paginator.build_page(["a", "b"])

        assert page.cursor is None
        assert page.exhausted is True

    def test_cursor_value_from_dict_and_entity(self):
        """Test reading the cursor field from documents and entities."""
        created = datetime(2024, 5, 1, tzinfo=timezone.utc)
        paginator = CursorPagination(cursor_field="created_at")

        assert paginator.cursor_value({"created_at": created}) == created
        assert paginator.cursor_value(Project(title="A", created_at=created)) == created
        assert paginator.cursor_value(None) is None

    def test_cursor_without_value_raises(self):
        """Test that a cursor lacking the ordering field is rejected."""
        paginator = CursorPagination(cursor_field="created_at")

        with pytest.raises(ValidationError):
            paginator.cursor_value({"title": "no timestamp"})

    def test_page_size_must_be_positive(self):
        """Test that page size below one is rejected."""
        with pytest.raises(ValidationError):
            CursorPagination(page_size=0)


class TestCursorPage:
    """Test cases for CursorPage."""

    def test_map_converts_items_and_cursor(self):
        """Test that mapping keeps the cursor pointing at the last converted item."""
        page = CursorPage(items=[1, 2], cursor=2, page_size=2)

        mapped = page.map(lambda n: n * 10)

        assert mapped.items == [10, 20]
        assert mapped.cursor == 20

    def test_map_keeps_exhausted_page_exhausted(self):
        """Test that mapping an exhausted page leaves no cursor."""
        page = CursorPage(items=[1], cursor=None, page_size=2)

        assert page.map(str).cursor is None
