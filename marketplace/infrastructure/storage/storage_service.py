"""
Storage service for file uploads and downloads.
Validates attachments, builds storage paths and wraps backend transfers
into observable upload tasks.
"""

import logging
import mimetypes
import uuid
from pathlib import Path
from typing import Dict, Optional

from marketplace.config import Settings
from marketplace.domain.models.attachment import Attachment, AttachmentType
from marketplace.domain.models.base import (
    DownloadError,
    StorageError,
    ValidationError,
    utc_now,
)
from marketplace.domain.services.object_storage import ObjectStorage
from marketplace.infrastructure.storage.upload_task import UploadTask


logger = logging.getLogger(__name__)


class StorageService:
    """Service for managing file storage through an object storage backend."""

    def __init__(self, backend: ObjectStorage, settings: Settings):
        self.backend = backend
        self.settings = settings

    def upload(
        self,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None
    ) -> UploadTask:
        """
        Prepare an upload of data to path.

        The transfer starts when the returned task is awaited or its events
        are iterated.

        Args:
            path: Destination path in storage
            data: File content
            content_type: MIME type of the file
            metadata: Optional custom metadata stored with the object

        Returns:
            UploadTask resolving to the download URL
        """
        if not path or not path.strip():
            raise ValidationError("Storage path cannot be empty", "path")

        chunk_size = self.settings.upload_chunk_size
        return UploadTask(
            path=path,
            total_bytes=len(data),
            transfer=lambda: self.backend.upload(path, data, content_type, metadata, chunk_size),
            resolve_url=lambda: self.backend.get_download_url(path)
        )

    async def upload_attachment(
        self,
        data: bytes,
        filename: str,
        uploaded_by: str,
        folder: str = "attachments"
    ) -> Attachment:
        """
        Upload a user file and describe it as an attachment.

        Raises:
            ValidationError: If the file is empty, too large or of a disallowed type
            UploadError: If the transfer fails
        """
        content_type, _ = mimetypes.guess_type(filename)
        self._validate_file(data, filename)

        path = self._generate_file_path(filename, folder, uploaded_by)
        url = await self.upload(
            path,
            data,
            content_type=content_type,
            metadata={"uploaded_by": uploaded_by, "file_name": filename}
        )
        logger.info(f"Uploaded {filename} to {path}")

        return Attachment(
            url=url,
            file_name=filename,
            file_type=AttachmentType.from_content_type(content_type),
            uploaded_by=uploaded_by,
            uploaded_at=utc_now(),
            path=path
        )

    async def delete(self, path: str) -> None:
        """Delete a stored file."""
        try:
            await self.backend.delete(path)
        except StorageError as e:
            logger.error(f"Error deleting file {path}: {str(e)}")
            raise

    async def get_download_url(self, path: str) -> str:
        """
        Resolve a retrievable URL for a stored file.

        Raises:
            DownloadError: If the file cannot be resolved
        """
        try:
            return await self.backend.get_download_url(path)
        except DownloadError as e:
            logger.error(f"Error resolving download URL for {path}: {str(e)}")
            raise
        except StorageError as e:
            logger.error(f"Error resolving download URL for {path}: {str(e)}")
            raise DownloadError(str(e), path) from e

    def _validate_file(self, content: bytes, filename: str) -> None:
        """Validate file before upload."""
        if not content:
            raise ValidationError("File content is empty", "data")

        max_size = self.settings.max_upload_size_bytes
        if len(content) > max_size:
            raise ValidationError(
                f"File too large. Maximum size: {max_size / 1024 / 1024:.1f}MB",
                "data"
            )

        extension = Path(filename).suffix.lower()
        if extension not in self.settings.allowed_upload_extensions:
            raise ValidationError(f"File type not allowed: {extension or filename}", "filename")

    def _generate_file_path(self, filename: str, folder: Optional[str] = None, user_id: Optional[str] = None) -> str:
        """Generate unique file path for storage."""
        safe_filename = self._sanitize_filename(filename)

        path_parts = []

        if folder:
            path_parts.append(folder)

        if user_id:
            path_parts.append(user_id)

        # Add date-based folder
        path_parts.append(utc_now().strftime("%Y/%m"))

        name_without_ext = Path(safe_filename).stem
        extension = Path(safe_filename).suffix
        unique_filename = f"{name_without_ext}_{uuid.uuid4().hex[:8]}{extension}"
        path_parts.append(unique_filename)

        return "/".join(path_parts)

    def _sanitize_filename(self, filename: str) -> str:
        """Sanitize filename for safe storage."""
        safe_chars = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-"

        safe_name = "".join(c if c in safe_chars else "_" for c in filename)

        if len(safe_name) > 200:
            name_part = Path(safe_name).stem[:180]
            ext_part = Path(safe_name).suffix
            safe_name = f"{name_part}{ext_part}"

        return safe_name
