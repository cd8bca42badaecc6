"""
Object storage infrastructure.
"""

from marketplace.config import Settings
from marketplace.domain.services.object_storage import ObjectStorage

from .memory_storage import InMemoryObjectStorage
from .storage_service import StorageService
from .upload_task import UploadTask, UploadProgress, UploadCompleted, UploadFailed


def get_object_storage(settings: Settings) -> ObjectStorage:
    """Build the object storage backend selected by configuration."""
    if settings.storage_backend == "memory":
        return InMemoryObjectStorage()

    from marketplace.infrastructure.supabase_client import get_supabase_client
    from .supabase_storage import SupabaseObjectStorage
    return SupabaseObjectStorage(
        get_supabase_client(),
        bucket=settings.storage_bucket,
        signed_url_expires_in=settings.signed_url_expires_in
    )


__all__ = [
    "InMemoryObjectStorage",
    "StorageService",
    "UploadTask",
    "UploadProgress",
    "UploadCompleted",
    "UploadFailed",
    "get_object_storage",
]
