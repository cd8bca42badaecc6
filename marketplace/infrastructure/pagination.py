"""
Cursor-based pagination utilities.
A cursor is the last item of the previous page; the next page starts strictly after it.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from marketplace.domain.models.base import ValidationError

T = TypeVar('T')
U = TypeVar('U')


@dataclass
class CursorPage(Generic[T]):
    """
    One page of results.
    cursor is the last item of the page, or None once fewer than page_size
    items came back, which signals that the listing is exhausted.
    """

    items: List[T] = field(default_factory=list)
    cursor: Optional[T] = None
    page_size: int = 10

    @property
    def exhausted(self) -> bool:
        return self.cursor is None

    @property
    def has_next(self) -> bool:
        return self.cursor is not None

    def map(self, convert: Callable[[T], U]) -> "CursorPage[U]":
        """Convert every item (and the cursor) with the same function."""
        items = [convert(item) for item in self.items]
        cursor = items[-1] if self.cursor is not None and items else None
        return CursorPage(items=items, cursor=cursor, page_size=self.page_size)


class CursorPagination:
    """
    Forward-only pagination over an ordered field.
    """

    def __init__(self, cursor_field: str = "created_at", page_size: int = 10):
        if page_size < 1:
            raise ValidationError("Page size must be positive", "page_size")
        self.cursor_field = cursor_field
        self.page_size = page_size

    def cursor_value(self, cursor: Any) -> Any:
        """Extract the ordering value from a cursor item (dict or entity)."""
        if cursor is None:
            return None
        if isinstance(cursor, dict):
            value = cursor.get(self.cursor_field)
        else:
            value = getattr(cursor, self.cursor_field, None)
        if value is None:
            raise ValidationError(
                f"Cursor has no {self.cursor_field} value",
                self.cursor_field
            )
        return value

    def build_page(self, items: List[T]) -> CursorPage[T]:
        """Wrap fetched items, deciding whether another page can follow."""
        cursor = items[-1] if len(items) >= self.page_size else None
        return CursorPage(items=items, cursor=cursor, page_size=self.page_size)
