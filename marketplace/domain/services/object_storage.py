"""
Object storage interface.
Defines the contract for binary file storage backends.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Dict, Optional


class ObjectStorage(ABC):
    """
    Port for a path-addressed blob store.
    Implementations raise UploadError, DownloadError or StorageError on failure.
    """

    @abstractmethod
    def upload(
        self,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        chunk_size: int = 256 * 1024
    ) -> AsyncIterator[int]:
        """
        Store data at path.
        Returns an async iterator yielding the cumulative number of bytes
        transferred; the upload is complete once the iterator is exhausted.
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """
        Delete the object stored at path.
        """
        pass

    @abstractmethod
    async def get_download_url(self, path: str) -> str:
        """
        Return a URL from which the object at path can be retrieved.
        """
        pass
