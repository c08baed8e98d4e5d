"""Storage abstraction for wiki pages."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from plainwiki.core.models import Page
from plainwiki.core.paths import is_valid_title

logger = logging.getLogger(__name__)

FILE_MODE = 0o600


class InvalidTitleError(OSError):
    """Raised when a title cannot be mapped to a storage location."""

    def __init__(self, title: str):
        super().__init__(f"invalid page title: {title!r}")
        self.title = title


class PageStore(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page:
        """Load a page by title.

        Raises:
            OSError: The page does not exist or could not be read.
        """
        ...

    @abstractmethod
    async def save(self, page: Page) -> None:
        """Save a page, creating or overwriting it.

        Raises:
            OSError: The page could not be written.
        """
        ...


class FileStorage(PageStore):
    """File-based storage implementation.

    Each page is one file holding the raw body bytes.
    File naming: Title.txt, readable and writable by the owner only.
    """

    def __init__(self, base_path: Path, atomic_writes: bool = True):
        self.base_path = base_path
        self.atomic_writes = atomic_writes
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return title + ".txt"

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        if not is_valid_title(title):
            raise InvalidTitleError(title)
        return self.base_path / self._title_to_filename(title)

    def _read(self, title: str) -> bytes:
        return self._get_path(title).read_bytes()

    def _write(self, title: str, body: bytes) -> None:
        path = self._get_path(title)
        if not self.atomic_writes:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(body)
            return

        # mkstemp creates the file with mode 0o600
        fd, tmp_name = tempfile.mkstemp(
            dir=self.base_path, prefix=f".{title}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(body)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def load(self, title: str) -> Page:
        """Load a page by title."""
        body = await run_in_threadpool(self._read, title)
        return Page(title=title, body=body)

    async def save(self, page: Page) -> None:
        """Save a page."""
        await run_in_threadpool(self._write, page.title, page.body)
        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))
