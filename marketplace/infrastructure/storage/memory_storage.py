"""
In-process object storage.
Used for local development and tests.
"""

import asyncio
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, Optional

from marketplace.domain.models.base import DownloadError
from marketplace.domain.services.object_storage import ObjectStorage


@dataclass
class StoredObject:
    data: bytes
    content_type: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


class InMemoryObjectStorage(ObjectStorage):
    """Dictionary-backed object storage that transfers in chunks."""

    def __init__(self, base_url: str = "memory://"):
        self.base_url = base_url
        self.objects: Dict[str, StoredObject] = {}

    async def upload(
        self,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        chunk_size: int = 256 * 1024
    ) -> AsyncIterator[int]:
        transferred = 0
        while transferred < len(data):
            # Yield to the loop between chunks so the transfer can be cancelled
            await asyncio.sleep(0)
            transferred = min(transferred + chunk_size, len(data))
            yield transferred
        self.objects[path] = StoredObject(bytes(data), content_type, dict(metadata or {}))
        if not data:
            yield 0

    async def delete(self, path: str) -> None:
        self.objects.pop(path, None)

    async def get_download_url(self, path: str) -> str:
        if path not in self.objects:
            raise DownloadError(f"No object stored at {path}", path)
        return f"{self.base_url}{path}"
