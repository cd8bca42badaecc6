"""
Generic document-backed repositories.
Every typed repository delegates to the single DocumentFacade.
"""

from typing import Generic, List, Optional, Sequence, TypeVar

from marketplace.application.dto.base_dto import UpdateRequestDTO
from marketplace.domain.models.base import BaseEntity, EntityNotFoundError
from marketplace.domain.repositories.base import Repository, MutableRepository
from marketplace.domain.repositories.document_store import FilterLike
from marketplace.infrastructure.db.facade import DocumentFacade
from marketplace.infrastructure.mappers.base import DocumentMapper

E = TypeVar('E', bound=BaseEntity)
P = TypeVar('P', bound=UpdateRequestDTO)


class DocumentRepository(Repository[E]):
    """Read and append operations for one collection."""

    collection: str = ""
    entity_name: str = "Document"

    def __init__(self, facade: DocumentFacade, mapper: DocumentMapper[E]):
        self.facade = facade
        self.mapper = mapper

    async def add(self, entity: E) -> E:
        """Validate and persist a new entity."""
        entity.validate()
        reference = await self.facade.add(self.collection, self.mapper.to_document(entity))
        return await self._require(reference.id)

    async def get(self, entity_id: str) -> Optional[E]:
        document = await self.facade.get(self.collection, entity_id)
        if document is None:
            return None
        return self.mapper.to_entity(document)

    async def list_all(self) -> List[E]:
        documents = await self.facade.get_all(self.collection)
        return [self.mapper.to_entity(document) for document in documents]

    async def find(
        self,
        filters: Sequence[FilterLike] = (),
        order_field: Optional[str] = None,
        order_direction: str = "asc",
        limit: Optional[int] = None
    ) -> List[E]:
        documents = await self.facade.query(
            self.collection,
            filters,
            order_field=order_field,
            order_direction=order_direction,
            limit=limit
        )
        return [self.mapper.to_entity(document) for document in documents]

    async def _require(self, entity_id: str) -> E:
        entity = await self.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity


class MutableDocumentRepository(DocumentRepository[E], MutableRepository[E, P], Generic[E, P]):
    """Adds partial updates and deletes to a document repository."""

    async def update(self, entity_id: str, patch: P) -> E:
        """Apply the fields set on the patch DTO and return the refreshed entity."""
        await self.facade.update(self.collection, entity_id, patch.to_patch())
        return await self._require(entity_id)

    async def delete(self, entity_id: str) -> None:
        await self.facade.delete(self.collection, entity_id)
