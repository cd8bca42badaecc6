"""
Observable upload task.
An upload reports progress as a stream of events and resolves to the
download URL of the stored object.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable, Optional, Union

from marketplace.domain.models.base import StorageError, UploadError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadProgress:
    """Cumulative transfer progress."""

    bytes_transferred: int
    total_bytes: int

    @property
    def fraction(self) -> float:
        if self.total_bytes == 0:
            return 1.0
        return self.bytes_transferred / self.total_bytes


@dataclass(frozen=True)
class UploadCompleted:
    """Terminal event: the object is stored and retrievable at url."""

    url: str


@dataclass(frozen=True)
class UploadFailed:
    """Terminal event: the upload failed or was cancelled."""

    error: UploadError
    cancelled: bool = False


UploadEvent = Union[UploadProgress, UploadCompleted, UploadFailed]


class UploadTask:
    """
    A single upload.

    Nothing is transferred until events() is iterated or the task is awaited.
    events() yields UploadProgress items followed by exactly one
    UploadCompleted or UploadFailed. Events are delivered to one consumer.
    """

    def __init__(
        self,
        path: str,
        total_bytes: int,
        transfer: Callable[[], AsyncIterator[int]],
        resolve_url: Callable[[], Awaitable[str]]
    ):
        self.path = path
        self.total_bytes = total_bytes
        self._transfer = transfer
        self._resolve_url = resolve_url
        self._events: asyncio.Queue = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self._url: Optional[str] = None
        self._error: Optional[UploadError] = None
        self._cancelled = False

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def done(self) -> bool:
        return self._url is not None or self._error is not None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _start(self) -> None:
        if self._task is None and not self.done:
            self._task = asyncio.get_running_loop().create_task(self._run())
            self._task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        # A task cancelled before its first step never enters _run
        if self.done:
            return
        if task.cancelled():
            self._fail(UploadError(f"Upload of {self.path} was cancelled", self.path), cancelled=True)
            return
        error = task.exception()
        logger.error(f"Unexpected error uploading {self.path}: {str(error)}")
        self._fail(UploadError(f"Upload of {self.path} failed: {str(error)}", self.path))

    async def _run(self) -> None:
        try:
            async for transferred in self._transfer():
                self._events.put_nowait(UploadProgress(transferred, self.total_bytes))
            url = await self._resolve_url()
        except asyncio.CancelledError:
            logger.info(f"Upload of {self.path} cancelled")
            self._fail(UploadError(f"Upload of {self.path} was cancelled", self.path), cancelled=True)
            return
        except UploadError as e:
            logger.error(f"Error uploading {self.path}: {str(e)}")
            self._fail(e)
            return
        except StorageError as e:
            logger.error(f"Error uploading {self.path}: {str(e)}")
            self._fail(UploadError(str(e), self.path))
            return

        self._url = url
        self._events.put_nowait(UploadCompleted(url))

    def _fail(self, error: UploadError, cancelled: bool = False) -> None:
        self._error = error
        self._cancelled = cancelled
        self._events.put_nowait(UploadFailed(error, cancelled))

    async def events(self) -> AsyncIterator[UploadEvent]:
        """Start the upload if needed and yield its events until the terminal one."""
        self._start()
        while True:
            event = await self._events.get()
            yield event
            if isinstance(event, (UploadCompleted, UploadFailed)):
                return

    async def result(self) -> str:
        """
        Wait for the upload to finish.

        Returns:
            Download URL of the stored object

        Raises:
            UploadError: If the upload failed or was cancelled
        """
        self._start()
        if self._task is not None:
            await asyncio.wait({self._task})
        if self._error is not None:
            raise self._error
        return self._url

    def __await__(self):
        return self.result().__await__()

    def cancel(self) -> bool:
        """
        Stop the upload.
        Returns False if it had already finished.
        """
        if self.done:
            return False
        if self._task is None:
            self._fail(UploadError(f"Upload of {self.path} was cancelled", self.path), cancelled=True)
            return True
        return self._task.cancel()
