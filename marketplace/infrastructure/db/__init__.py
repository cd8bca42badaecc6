"""
Document database infrastructure.
Contains the store backends and the generic data-access facade.
"""

from marketplace.config import Settings
from marketplace.domain.repositories.document_store import DocumentStore

from .facade import DocumentFacade, Statistics
from .memory_store import InMemoryDocumentStore


def get_document_store(settings: Settings) -> DocumentStore:
    """Build the document store selected by configuration."""
    if settings.document_backend == "memory":
        return InMemoryDocumentStore()

    from marketplace.infrastructure.supabase_client import get_supabase_client
    from .supabase_store import SupabaseDocumentStore
    return SupabaseDocumentStore(get_supabase_client())


__all__ = [
    "DocumentFacade",
    "Statistics",
    "InMemoryDocumentStore",
    "get_document_store",
]
