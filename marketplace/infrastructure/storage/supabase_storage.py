"""
Supabase Storage backend.
Objects live in a single bucket and are served through signed URLs.
"""

import asyncio
from typing import AsyncIterator, Dict, Optional

from supabase import Client

from marketplace.domain.models.base import DownloadError, StorageError, UploadError
from marketplace.domain.services.object_storage import ObjectStorage


class SupabaseObjectStorage(ObjectStorage):
    """Object storage backed by a Supabase Storage bucket."""

    def __init__(self, supabase_client: Client, bucket: str = "attachments", signed_url_expires_in: int = 3600):
        """Initialize storage backend with Supabase client."""
        self.client = supabase_client
        self.bucket = bucket
        self.signed_url_expires_in = signed_url_expires_in

    async def upload(
        self,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        chunk_size: int = 256 * 1024
    ) -> AsyncIterator[int]:
        # Storage uploads are single requests; progress is reported before and after.
        # Cancelling abandons the request thread, the object may still be written.
        yield 0
        file_options = {
            "content-type": content_type or "application/octet-stream",
            "upsert": "true"
        }
        if metadata:
            file_options["metadata"] = dict(metadata)
        try:
            await asyncio.to_thread(
                self.client.storage.from_(self.bucket).upload,
                path=path,
                file=data,
                file_options=file_options
            )
        except Exception as e:
            raise UploadError(f"Failed to upload file: {str(e)}", path) from e
        yield len(data)

    async def delete(self, path: str) -> None:
        try:
            await asyncio.to_thread(self.client.storage.from_(self.bucket).remove, [path])
        except Exception as e:
            raise StorageError(f"Failed to delete file: {str(e)}", path) from e

    async def get_download_url(self, path: str) -> str:
        try:
            response = await asyncio.to_thread(
                self.client.storage.from_(self.bucket).create_signed_url,
                path,
                self.signed_url_expires_in
            )
            return response["signedURL"]
        except Exception as e:
            raise DownloadError(f"Failed to create signed URL: {str(e)}", path) from e
