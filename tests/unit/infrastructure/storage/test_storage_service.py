"""
Unit tests for the storage service.
"""

import pytest

from marketplace.config import Settings
from marketplace.domain.models import AttachmentType, DownloadError, ValidationError
from marketplace.infrastructure.storage import InMemoryObjectStorage, StorageService


@pytest.fixture
def backend():
    return InMemoryObjectStorage()


@pytest.fixture
def service(backend):
    settings = Settings(
        storage_backend="memory",
        max_upload_size_mb=1,
        allowed_upload_extensions=".pdf,.png",
        upload_chunk_size=1024
    )
    return StorageService(backend, settings)


class TestStorageService:
    """Test cases for StorageService."""

    @pytest.mark.asyncio
    async def test_upload_attachment(self, service, backend):
        """Test uploading a user file as an attachment."""
        attachment = await service.upload_attachment(b"%PDF-1.7 brief", "Project Brief.pdf", "u1")

        assert attachment.file_name == "Project Brief.pdf"
        assert attachment.file_type == AttachmentType.DOCUMENT
        assert attachment.uploaded_by == "u1"
        assert attachment.path.startswith("attachments/u1/")
        assert attachment.path.endswith(".pdf")
        assert " " not in attachment.path
        assert attachment.url == f"memory://{attachment.path}"
        assert backend.objects[attachment.path].content_type == "application/pdf"
        assert backend.objects[attachment.path].metadata["uploaded_by"] == "u1"

    @pytest.mark.asyncio
    async def test_image_attachment_type(self, service):
        """Test that images are typed from their MIME type."""
        attachment = await service.upload_attachment(b"\x89PNG", "logo.png", "u1", folder="logos")

        assert attachment.file_type == AttachmentType.IMAGE
        assert attachment.path.startswith("logos/u1/")

    @pytest.mark.asyncio
    async def test_same_name_gets_distinct_paths(self, service):
        """Test that repeated uploads never overwrite each other."""
        first = await service.upload_attachment(b"a", "a.pdf", "u1")
        second = await service.upload_attachment(b"b", "a.pdf", "u1")

        assert first.path != second.path

    @pytest.mark.asyncio
    async def test_rejects_empty_file(self, service):
        """Test that empty content is rejected."""
        with pytest.raises(ValidationError, match="empty"):
            await service.upload_attachment(b"", "a.pdf", "u1")

    @pytest.mark.asyncio
    async def test_rejects_large_file(self, service):
        """Test the configured size limit."""
        with pytest.raises(ValidationError, match="too large"):
            await service.upload_attachment(b"x" * (1024 * 1024 + 1), "a.pdf", "u1")

    @pytest.mark.asyncio
    async def test_rejects_disallowed_extension(self, service, backend):
        """Test the configured extension allow-list."""
        with pytest.raises(ValidationError, match="not allowed"):
            await service.upload_attachment(b"MZ", "setup.exe", "u1")

        assert backend.objects == {}

    def test_upload_requires_path(self, service):
        """Test that an empty destination path is rejected."""
        with pytest.raises(ValidationError):
            service.upload("", b"abc")

    @pytest.mark.asyncio
    async def test_upload_with_metadata(self, service, backend):
        """Test the low-level upload with metadata."""
        url = await service.upload("raw/data.bin", b"abc", "application/octet-stream", {"k": "v"})

        assert url == "memory://raw/data.bin"
        assert backend.objects["raw/data.bin"].metadata == {"k": "v"}

    @pytest.mark.asyncio
    async def test_download_url_for_missing_file(self, service):
        """Test that resolving a missing file raises DownloadError."""
        with pytest.raises(DownloadError):
            await service.get_download_url("nope.pdf")

    @pytest.mark.asyncio
    async def test_delete(self, service, backend):
        """Test deleting a stored file."""
        attachment = await service.upload_attachment(b"a", "a.pdf", "u1")

        await service.delete(attachment.path)

        assert attachment.path not in backend.objects
