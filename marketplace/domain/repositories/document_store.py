"""
Document store interface.
Defines the contract every document database backend must fulfil.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from enum import Enum

from marketplace.domain.models.base import ValidationError, ensure_utc


class FilterOperator(str, Enum):
    """Comparison operators supported in query filters."""
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    IN = "in"
    NOT_IN = "not-in"
    ARRAY_CONTAINS = "array-contains"
    ARRAY_CONTAINS_ANY = "array-contains-any"


class SortDirection(str, Enum):
    """Sort direction for ordered queries."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FieldFilter:
    """
    A single (field, operator, value) predicate.
    Filters in a query are AND-combined. Some stores only allow inequality
    operators on one field per query; this layer does not enforce that.
    """

    field: str
    op: FilterOperator
    value: Any

    def __post_init__(self):
        object.__setattr__(self, "value", _normalize_value(self.value))

    @classmethod
    def of(cls, candidate: Union["FieldFilter", Tuple[str, str, Any]]) -> "FieldFilter":
        """Build a filter from a FieldFilter or a (field, op, value) tuple."""
        if isinstance(candidate, FieldFilter):
            return candidate
        try:
            field_name, op, value = candidate
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid filter: {candidate!r}")
        try:
            operator = FilterOperator(op)
        except ValueError:
            raise ValidationError(f"Unsupported filter operator: {op}", field_name)
        if operator in (
            FilterOperator.IN,
            FilterOperator.NOT_IN,
            FilterOperator.ARRAY_CONTAINS_ANY
        ) and not isinstance(value, (list, tuple, set)):
            raise ValidationError(f"Operator {op} requires a list value", field_name)
        return cls(field_name, operator, value)


def _normalize_value(value: Any) -> Any:
    """Naive datetimes compare as UTC against the aware timestamps in the store."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (list, tuple, set)):
        return type(value)(_normalize_value(item) for item in value)
    return value


FilterLike = Union[FieldFilter, Tuple[str, str, Any]]


@dataclass(frozen=True)
class DocumentReference:
    """Reference to a stored document."""

    collection: str
    id: str


class DocumentStore(ABC):
    """
    Port for a schema-flexible document database grouped into named collections.
    Documents are plain dicts; returned documents always carry their "id".
    Implementations raise ReadError or WriteError on transport or permission failure.
    """

    @abstractmethod
    async def insert(self, collection: str, data: Dict[str, Any]) -> str:
        """
        Write a new document and return its store-assigned id.
        """
        pass

    @abstractmethod
    async def fetch(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch one document, or None if it does not exist.
        """
        pass

    @abstractmethod
    async def fetch_all(self, collection: str) -> List[Dict[str, Any]]:
        """
        Fetch every document in a collection, in no particular order.
        """
        pass

    @abstractmethod
    async def patch(self, collection: str, document_id: str, fields: Dict[str, Any]) -> bool:
        """
        Merge fields into an existing document.
        Returns False, without writing anything, if the document does not exist.
        """
        pass

    @abstractmethod
    async def remove(self, collection: str, document_id: str) -> None:
        """
        Delete a document. Deleting a missing document is not an error.
        """
        pass

    @abstractmethod
    async def select(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_field: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
        limit: Optional[int] = None,
        start_after: Any = None
    ) -> List[Dict[str, Any]]:
        """
        Run a filtered, optionally ordered and limited query.
        start_after is a value of order_field; results begin strictly after it.
        """
        pass

    @abstractmethod
    async def count(self, collection: str) -> int:
        """
        Count the documents in a collection.
        """
        pass
