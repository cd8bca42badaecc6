"""
In-process document store.
Keeps collections in dictionaries; used for local development and tests.
"""

import copy
import uuid
from typing import Any, Dict, List, Optional, Sequence

from marketplace.domain.models.base import ReadError
from marketplace.domain.repositories.document_store import (
    DocumentStore,
    FieldFilter,
    FilterOperator,
    SortDirection,
)

_MISSING = object()


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed implementation of the document store."""

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def _collection(self, name: str) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(name, {})

    @staticmethod
    def _with_id(document_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        document = copy.deepcopy(data)
        document["id"] = document_id
        return document

    async def insert(self, collection: str, data: Dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex
        stored = copy.deepcopy(data)
        stored.pop("id", None)
        self._collection(collection)[document_id] = stored
        return document_id

    async def fetch(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        stored = self._collection(collection).get(document_id)
        if stored is None:
            return None
        return self._with_id(document_id, stored)

    async def fetch_all(self, collection: str) -> List[Dict[str, Any]]:
        return [
            self._with_id(document_id, stored)
            for document_id, stored in self._collection(collection).items()
        ]

    async def patch(self, collection: str, document_id: str, fields: Dict[str, Any]) -> bool:
        stored = self._collection(collection).get(document_id)
        if stored is None:
            return False
        changes = copy.deepcopy(fields)
        changes.pop("id", None)
        stored.update(changes)
        return True

    async def remove(self, collection: str, document_id: str) -> None:
        self._collection(collection).pop(document_id, None)

    async def select(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_field: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
        limit: Optional[int] = None,
        start_after: Any = None
    ) -> List[Dict[str, Any]]:
        documents = await self.fetch_all(collection)
        try:
            documents = [d for d in documents if all(_matches(d, f) for f in filters)]

            if order_field:
                descending = SortDirection(direction) == SortDirection.DESC
                # Documents without the order field never appear in ordered results
                documents = [d for d in documents if d.get(order_field) is not None]
                documents.sort(key=lambda d: d[order_field], reverse=descending)
                if start_after is not None:
                    if descending:
                        documents = [d for d in documents if d[order_field] < start_after]
                    else:
                        documents = [d for d in documents if d[order_field] > start_after]
        except TypeError as e:
            raise ReadError(f"Failed to query {collection}: {str(e)}", collection) from e

        if limit is not None:
            documents = documents[:limit]
        return documents

    async def count(self, collection: str) -> int:
        return len(self._collection(collection))

    def clear(self) -> None:
        """Drop every collection."""
        self._collections.clear()


def _matches(document: Dict[str, Any], field_filter: FieldFilter) -> bool:
    """Evaluate one predicate against a document."""
    actual = document.get(field_filter.field, _MISSING)
    if actual is _MISSING:
        return False

    op = field_filter.op
    expected = field_filter.value
    if op == FilterOperator.EQ:
        return actual == expected
    if op == FilterOperator.NE:
        return actual != expected
    if op == FilterOperator.LT:
        return actual is not None and actual < expected
    if op == FilterOperator.LE:
        return actual is not None and actual <= expected
    if op == FilterOperator.GT:
        return actual is not None and actual > expected
    if op == FilterOperator.GE:
        return actual is not None and actual >= expected
    if op == FilterOperator.IN:
        return actual in expected
    if op == FilterOperator.NOT_IN:
        return actual not in expected
    if op == FilterOperator.ARRAY_CONTAINS:
        return isinstance(actual, list) and expected in actual
    if op == FilterOperator.ARRAY_CONTAINS_ANY:
        return isinstance(actual, list) and any(value in actual for value in expected)
    return False
