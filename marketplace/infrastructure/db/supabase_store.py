"""
Supabase document store.
Each collection maps to a PostgREST table whose columns are the document fields
plus id, created_at and updated_at.
"""

import asyncio
from datetime import datetime, date
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from supabase import Client

from marketplace.domain.models.base import ReadError, WriteError
from marketplace.domain.repositories.document_store import (
    DocumentStore,
    FieldFilter,
    FilterOperator,
    SortDirection,
)


def encode_value(value: Any) -> Any:
    """Convert a document value into its JSON wire form."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [encode_value(item) for item in value]
    return value


class SupabaseDocumentStore(DocumentStore):
    """
    Document store backed by Supabase (PostgREST) tables.
    The client is synchronous, so each request runs in a worker thread.
    """

    def __init__(self, supabase_client: Client):
        """Initialize document store with Supabase client."""
        self.client = supabase_client

    async def insert(self, collection: str, data: Dict[str, Any]) -> str:
        row = encode_value({k: v for k, v in data.items() if k != "id"})
        try:
            response = await asyncio.to_thread(self.client.table(collection).insert(row).execute)
        except Exception as e:
            raise WriteError(f"Failed to insert into {collection}: {str(e)}", collection) from e

        if not response.data:
            raise WriteError(f"Insert into {collection} returned no row", collection)
        return str(response.data[0]["id"])

    async def fetch(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        try:
            query = self.client.table(collection).select("*").eq("id", document_id).limit(1)
            response = await asyncio.to_thread(query.execute)
        except Exception as e:
            raise ReadError(f"Failed to read {collection}/{document_id}: {str(e)}", collection) from e

        if not response.data:
            return None
        return response.data[0]

    async def fetch_all(self, collection: str) -> List[Dict[str, Any]]:
        try:
            response = await asyncio.to_thread(self.client.table(collection).select("*").execute)
        except Exception as e:
            raise ReadError(f"Failed to read {collection}: {str(e)}", collection) from e
        return list(response.data or [])

    async def patch(self, collection: str, document_id: str, fields: Dict[str, Any]) -> bool:
        changes = encode_value({k: v for k, v in fields.items() if k != "id"})
        try:
            query = self.client.table(collection).update(changes).eq("id", document_id)
            response = await asyncio.to_thread(query.execute)
        except Exception as e:
            raise WriteError(f"Failed to update {collection}/{document_id}: {str(e)}", collection) from e

        # PostgREST returns the updated rows; none means no row matched the id
        return bool(response.data)

    async def remove(self, collection: str, document_id: str) -> None:
        try:
            query = self.client.table(collection).delete().eq("id", document_id)
            await asyncio.to_thread(query.execute)
        except Exception as e:
            raise WriteError(f"Failed to delete {collection}/{document_id}: {str(e)}", collection) from e

    async def select(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_field: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
        limit: Optional[int] = None,
        start_after: Any = None
    ) -> List[Dict[str, Any]]:
        try:
            query = self.client.table(collection).select("*")
            for field_filter in filters:
                query = self._apply_filter(query, field_filter)

            if order_field:
                descending = SortDirection(direction) == SortDirection.DESC
                query = query.not_.is_(order_field, "null")
                if start_after is not None:
                    cursor_value = encode_value(start_after)
                    if descending:
                        query = query.lt(order_field, cursor_value)
                    else:
                        query = query.gt(order_field, cursor_value)
                query = query.order(order_field, desc=descending)

            if limit is not None:
                query = query.limit(limit)

            response = await asyncio.to_thread(query.execute)
        except Exception as e:
            raise ReadError(f"Failed to query {collection}: {str(e)}", collection) from e

        return list(response.data or [])

    async def count(self, collection: str) -> int:
        try:
            query = self.client.table(collection).select("id", count="exact", head=True)
            response = await asyncio.to_thread(query.execute)
        except Exception as e:
            raise ReadError(f"Failed to count {collection}: {str(e)}", collection) from e
        return response.count or 0

    @staticmethod
    def _apply_filter(query, field_filter: FieldFilter):
        """Translate one predicate into the matching PostgREST operator."""
        column = field_filter.field
        value = encode_value(field_filter.value)
        op = field_filter.op

        if op == FilterOperator.EQ:
            if value is None:
                return query.is_(column, "null")
            return query.eq(column, value)
        if op == FilterOperator.NE:
            if value is None:
                return query.not_.is_(column, "null")
            return query.neq(column, value)
        if op == FilterOperator.LT:
            return query.lt(column, value)
        if op == FilterOperator.LE:
            return query.lte(column, value)
        if op == FilterOperator.GT:
            return query.gt(column, value)
        if op == FilterOperator.GE:
            return query.gte(column, value)
        if op == FilterOperator.IN:
            return query.in_(column, list(value))
        if op == FilterOperator.NOT_IN:
            return query.not_.in_(column, list(value))
        if op == FilterOperator.ARRAY_CONTAINS:
            return query.contains(column, [value])
        if op == FilterOperator.ARRAY_CONTAINS_ANY:
            return query.overlaps(column, list(value))

        raise ValueError(f"Unsupported filter operator: {op}")
