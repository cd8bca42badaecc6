"""
Generic data-access facade.
Uniform add/get/update/delete/query operations over any named collection,
plus the dashboard aggregates and project pagination built on them.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence

from marketplace.domain.models.base import (
    DataAccessError,
    DocumentNotFoundError,
    ValidationError,
    ensure_utc,
    utc_now,
)
from marketplace.domain.repositories.document_store import (
    DocumentReference,
    DocumentStore,
    FieldFilter,
    FilterLike,
    SortDirection,
)
from marketplace.infrastructure.pagination import CursorPage, CursorPagination


logger = logging.getLogger(__name__)

PROJECTS = "projects"
USERS = "users"
TASKS = "tasks"
ACTIVITIES = "activities"

PROTECTED_FIELDS = ("id", "created_at", "updated_at")


@dataclass(frozen=True)
class Statistics:
    """Dashboard counters."""

    total_projects: int
    total_freelancers: int
    total_tasks_completed: int


class DocumentFacade:
    """
    Collection-parameterized CRUD and query operations over a document store.

    Every failure is logged and then re-raised unchanged. A missing document on
    get is reported as None. Updating a missing document raises
    DocumentNotFoundError and never creates one.
    """

    def __init__(self, store: DocumentStore, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self._clock = clock or utc_now
        self._last_timestamp: Optional[datetime] = None

    def _timestamp(self) -> datetime:
        """Current time, strictly later than any timestamp issued before."""
        now = self._clock()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def add(self, collection: str, data: Dict[str, Any]) -> DocumentReference:
        """
        Add a new document to a collection.

        Args:
            collection: The name of the collection
            data: Document fields, without id or timestamps

        Returns:
            Reference to the newly added document

        Raises:
            ValidationError: If the payload carries an id
            WriteError: If the store rejects the write
        """
        if "id" in data:
            logger.warning(f"Rejected new document for {collection}: payload carries an id")
            raise ValidationError("New documents cannot carry an id; the store assigns it", "id")

        now = self._timestamp()
        payload = {**data, "created_at": now, "updated_at": now}
        try:
            document_id = await self.store.insert(collection, payload)
        except DataAccessError as e:
            logger.error(f"Error adding document to {collection}: {str(e)}")
            raise
        return DocumentReference(collection=collection, id=document_id)

    async def get(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve a single document by its id.

        Returns:
            The document fields merged with its id, or None if not found
        """
        try:
            document = await self.store.fetch(collection, document_id)
        except DataAccessError as e:
            logger.error(f"Error getting document from {collection}: {str(e)}")
            raise

        if document is None:
            logger.warning(f"No document found with ID: {document_id} in {collection}")
            return None
        document["id"] = document_id
        return document

    async def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """
        Retrieve every document in a collection.
        Unordered and unbounded; use query() when order or size matters.
        """
        try:
            return await self.store.fetch_all(collection)
        except DataAccessError as e:
            logger.error(f"Error getting all documents from {collection}: {str(e)}")
            raise

    async def update(self, collection: str, document_id: str, patch: Dict[str, Any]) -> None:
        """
        Merge a partial patch into a document and refresh updated_at.

        Raises:
            ValidationError: If the patch touches id, created_at or updated_at
            DocumentNotFoundError: If no document has this id
            WriteError: If the store rejects the write
        """
        forbidden = [name for name in PROTECTED_FIELDS if name in patch]
        if forbidden:
            logger.warning(f"Rejected update of {collection}/{document_id}: protected fields {forbidden}")
            raise ValidationError(
                f"Cannot update protected fields: {', '.join(forbidden)}",
                forbidden[0]
            )

        changes = {**patch, "updated_at": self._timestamp()}
        try:
            updated = await self.store.patch(collection, document_id, changes)
            if not updated:
                raise DocumentNotFoundError(collection, document_id)
        except DataAccessError as e:
            logger.error(f"Error updating document in {collection}: {str(e)}")
            raise

    async def delete(self, collection: str, document_id: str) -> None:
        """
        Delete a document. Deleting a missing document is a no-op.
        Dependent documents are left untouched.
        """
        try:
            await self.store.remove(collection, document_id)
        except DataAccessError as e:
            logger.error(f"Error deleting document from {collection}: {str(e)}")
            raise

    async def query(
        self,
        collection: str,
        filters: Sequence[FilterLike] = (),
        order_field: Optional[str] = None,
        order_direction: str = "asc",
        limit: Optional[int] = None,
        start_after: Any = None
    ) -> List[Dict[str, Any]]:
        """
        Query documents matching all filters.

        Args:
            collection: The name of the collection
            filters: (field, operator, value) predicates, AND-combined
            order_field: Field to order the results by
            order_direction: 'asc' or 'desc'
            limit: Maximum number of documents to return
            start_after: Value of order_field after which results begin

        Returns:
            Matching documents, each carrying its id
        """
        try:
            predicates = [FieldFilter.of(candidate) for candidate in filters]
            direction = self._validate_query(order_direction, limit, order_field, start_after)
        except ValidationError as e:
            logger.warning(f"Invalid query on {collection}: {e.message}")
            raise
        if isinstance(start_after, datetime):
            start_after = ensure_utc(start_after)

        try:
            return await self.store.select(
                collection,
                predicates,
                order_field=order_field,
                direction=direction,
                limit=limit,
                start_after=start_after
            )
        except DataAccessError as e:
            logger.error(f"Error querying documents from {collection}: {str(e)}")
            raise

    @staticmethod
    def _validate_query(
        order_direction: str,
        limit: Optional[int],
        order_field: Optional[str],
        start_after: Any
    ) -> SortDirection:
        try:
            direction = SortDirection(order_direction)
        except ValueError:
            raise ValidationError(f"Invalid order direction: {order_direction}", "order_direction")
        if limit is not None and limit < 0:
            raise ValidationError("Limit cannot be negative", "limit")
        if start_after is not None and not order_field:
            raise ValidationError("start_after requires an order field", "start_after")
        return direction

    async def get_statistics(self) -> Statistics:
        """
        Fetch the dashboard counters.
        The three counts run concurrently and any single failure fails the whole call.
        """
        try:
            total_projects, total_freelancers, total_tasks = await asyncio.gather(
                self.store.count(PROJECTS),
                self.store.count(USERS),
                self.store.count(TASKS)
            )
        except DataAccessError as e:
            logger.error(f"Error fetching statistics: {str(e)}")
            raise

        return Statistics(
            total_projects=total_projects,
            total_freelancers=total_freelancers,
            total_tasks_completed=total_tasks
        )

    async def get_recent_activities(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Fetch the most recent activity log entries, newest first."""
        try:
            return await self.query(
                ACTIVITIES,
                order_field="timestamp",
                order_direction="desc",
                limit=limit
            )
        except DataAccessError as e:
            logger.error(f"Error fetching recent activities: {str(e)}")
            raise

    async def get_projects_with_pagination(
        self,
        page_size: int = 10,
        cursor: Any = None
    ) -> CursorPage[Dict[str, Any]]:
        """
        Fetch one page of projects, newest first.

        Args:
            page_size: Number of projects per page
            cursor: Last project of the previous page, or None for the first page

        Returns:
            The page; its cursor is None once the listing is exhausted
        """
        paginator = CursorPagination(cursor_field="created_at", page_size=page_size)
        try:
            projects = await self.query(
                PROJECTS,
                order_field=paginator.cursor_field,
                order_direction="desc",
                limit=page_size,
                start_after=paginator.cursor_value(cursor)
            )
        except DataAccessError as e:
            logger.error(f"Error fetching paginated projects: {str(e)}")
            raise
        return paginator.build_page(projects)
