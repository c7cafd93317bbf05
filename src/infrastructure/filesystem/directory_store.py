"""Read-only filesystem operations in virtual path terms."""
import locale
import posixpath
import stat as stat_module
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator, List, Tuple, Union

import aiofiles
import aiofiles.os

from src.infrastructure.logging import get_logger
from src.infrastructure.metrics import record_filesystem_operation

from .containment import ContainmentChecker
from .errors import NotFoundError
from .file_types import FileType, classify
from .path_mapper import PathMapper
from .path_sanitizer import PathSanitizer
from .types import DirectoryEntry

logger = get_logger(__name__)


def use_system_collation() -> None:
    """Collate names with the locale from the environment."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.info("collation_locale_unavailable", error=str(e))


def _fold_accents(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def entry_sort_key(entry: DirectoryEntry) -> Tuple[bool, str, str, str]:
    """
    Directories first, then locale-aware name order.

    Accent-folded names compare first so "éclair" sorts with "e" even
    when the process collates in the C locale.
    """
    folded = entry.name.casefold()
    return (
        not entry.is_directory,
        _fold_accents(folded),
        locale.strxfrm(folded),
        entry.name,
    )


class DirectoryStore:
    """Lists, stats and reads entries beneath a single root."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self.mapper = PathMapper(self.root)
        self.initialized = False

    async def initialize(self) -> None:
        """Verify the root is a readable directory."""
        if self.initialized:
            return

        if not await aiofiles.os.path.isdir(self.root):
            logger.error("data_root_unavailable")
            raise NotFoundError(PathSanitizer.ROOT, "Data root is not available")

        self.initialized = True
        logger.info("directory_store_initialized")

    async def list(self, virtual_path: str = "/") -> List[DirectoryEntry]:
        """
        List immediate children of a directory.

        Args:
            virtual_path: Directory to list

        Returns:
            Entries with directories first, each group sorted by name

        Raises:
            InvalidPathError: If the path fails sanitization
            NotFoundError: If the path is missing or not a directory
        """
        virtual, real = self._resolve(virtual_path)

        try:
            names = await aiofiles.os.listdir(real)
        except FileNotFoundError:
            record_filesystem_operation("list", "not_found")
            raise NotFoundError(virtual, "Directory not found")
        except NotADirectoryError:
            record_filesystem_operation("list", "not_found")
            raise NotFoundError(virtual, "Path is not a directory")
        except PermissionError:
            record_filesystem_operation("list", "not_found")
            raise NotFoundError(virtual, "Directory is not accessible")

        entries = []
        for name in names:
            child = real / name

            if not ContainmentChecker.is_contained(child, self.root):
                logger.warning("entry_outside_root_skipped", path=virtual, name=name)
                continue

            try:
                child_stat = await aiofiles.os.stat(child)
            except OSError as e:
                logger.warning(
                    "entry_stat_failed",
                    path=virtual,
                    name=name,
                    error_type=type(e).__name__,
                )
                continue

            entries.append(
                self._make_entry(name, posixpath.join(virtual, name), child_stat)
            )

        entries.sort(key=entry_sort_key)
        record_filesystem_operation("list", "ok")

        logger.debug("directory_listed", path=virtual, count=len(entries))
        return entries

    async def read_file(self, virtual_path: str) -> bytes:
        """Read entire file content as stored."""
        virtual, real = await self._resolve_file(virtual_path, "read")

        try:
            async with aiofiles.open(real, "rb") as f:
                content = await f.read()
        except FileNotFoundError:
            record_filesystem_operation("read", "not_found")
            raise NotFoundError(virtual, "File not found")
        except IsADirectoryError:
            record_filesystem_operation("read", "not_found")
            raise NotFoundError(virtual, "Path is a directory")
        except PermissionError:
            record_filesystem_operation("read", "not_found")
            raise NotFoundError(virtual, "File is not accessible")

        record_filesystem_operation("read", "ok")
        return content

    async def read_file_stream(
        self,
        virtual_path: str,
        chunk_size: int = 65536
    ) -> AsyncIterator[bytes]:
        """Read file in chunks for streaming."""
        virtual, real = await self._resolve_file(virtual_path, "stream")

        try:
            async with aiofiles.open(real, "rb") as f:
                while True:
                    chunk = await f.read(chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except (FileNotFoundError, IsADirectoryError, PermissionError):
            record_filesystem_operation("stream", "not_found")
            raise NotFoundError(virtual, "File not found")

        record_filesystem_operation("stream", "ok")

    async def stat(self, virtual_path: str) -> DirectoryEntry:
        """Metadata for a single file or directory."""
        virtual, real = self._resolve(virtual_path)

        try:
            entry_stat = await aiofiles.os.stat(real)
        except (FileNotFoundError, NotADirectoryError):
            record_filesystem_operation("stat", "not_found")
            raise NotFoundError(virtual, "Path not found")
        except PermissionError:
            record_filesystem_operation("stat", "not_found")
            raise NotFoundError(virtual, "Path is not accessible")

        record_filesystem_operation("stat", "ok")

        name = PathSanitizer.get_file_name(virtual) or PathSanitizer.ROOT
        return self._make_entry(name, virtual, entry_stat)

    @staticmethod
    def classify(name: str, is_directory: bool) -> FileType:
        return classify(name, is_directory)

    def _resolve(self, virtual_path: str) -> Tuple[str, Path]:
        """Sanitize, map and containment-check a virtual path."""
        virtual = PathSanitizer.sanitize(virtual_path)
        real = self.mapper.to_real(virtual)

        if not ContainmentChecker.is_contained(real, self.root):
            logger.warning("containment_violation", path=virtual)
            raise NotFoundError(virtual, "Path not found")

        return virtual, Path(real)

    async def _resolve_file(self, virtual_path: str, operation: str) -> Tuple[str, Path]:
        virtual, real = self._resolve(virtual_path)

        try:
            file_stat = await aiofiles.os.stat(real)
        except (FileNotFoundError, NotADirectoryError, PermissionError):
            record_filesystem_operation(operation, "not_found")
            raise NotFoundError(virtual, "File not found")

        if stat_module.S_ISDIR(file_stat.st_mode):
            record_filesystem_operation(operation, "not_found")
            raise NotFoundError(virtual, "Path is a directory")

        return virtual, real

    def _make_entry(self, name: str, virtual: str, entry_stat) -> DirectoryEntry:
        is_directory = stat_module.S_ISDIR(entry_stat.st_mode)

        return DirectoryEntry(
            name=name,
            path=virtual,
            is_directory=is_directory,
            size=None if is_directory else entry_stat.st_size,
            last_modified=datetime.fromtimestamp(entry_stat.st_mtime, tz=timezone.utc),
            type=classify(name, is_directory),
        )
