"""
Generic repository interfaces.
Every typed repository is parameterized by the entity it stores.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel

from marketplace.domain.models.base import BaseEntity
from marketplace.domain.repositories.document_store import FilterLike

E = TypeVar('E', bound=BaseEntity)
P = TypeVar('P', bound=BaseModel)


class Repository(ABC, Generic[E]):
    """
    Read and append operations for one entity kind.
    """

    @abstractmethod
    async def add(self, entity: E) -> E:
        """
        Persist a new entity.
        Returns the stored entity with id and timestamps filled in.
        """
        pass

    @abstractmethod
    async def get(self, entity_id: str) -> Optional[E]:
        """
        Find an entity by id. Returns None if not found.
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[E]:
        """
        Return every entity of this kind, unordered.
        """
        pass

    @abstractmethod
    async def find(
        self,
        filters: Sequence[FilterLike] = (),
        order_field: Optional[str] = None,
        order_direction: str = "asc",
        limit: Optional[int] = None
    ) -> List[E]:
        """
        Find entities matching all filters.
        """
        pass


class MutableRepository(Repository[E], Generic[E, P]):
    """
    Repository whose entities can be patched and deleted.
    """

    @abstractmethod
    async def update(self, entity_id: str, patch: P) -> E:
        """
        Apply a partial update and return the refreshed entity.
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """
        Delete an entity. Deleting a missing entity is not an error.
        """
        pass
