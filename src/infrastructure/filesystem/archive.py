"""ZIP archives of virtual directories."""
import os
import posixpath
import tempfile
import zipfile
from typing import IO, Tuple

from src.infrastructure.logging import get_logger
from src.infrastructure.metrics import archive_size_bytes

from .directory_store import DirectoryStore
from .errors import NotFoundError
from .path_sanitizer import PathSanitizer

logger = get_logger(__name__)

# Archives larger than this spill from memory to a temporary file
SPOOL_MAX_SIZE = 16 * 1024 * 1024


def archive_name(virtual_path: str) -> str:
    name = PathSanitizer.get_file_name(virtual_path) or "root"
    return f"{name}.zip"


async def build_archive(
    store: DirectoryStore,
    virtual_path: str,
    chunk_size: int = 65536
) -> Tuple[str, IO[bytes]]:
    """
    Build a ZIP archive of a directory.

    Members are gathered through the store, so every file passes the
    same sanitization and containment checks as a direct read.

    Args:
        store: Store to read from
        virtual_path: Directory to archive
        chunk_size: Read size used when copying file content

    Returns:
        Tuple of (download filename, archive file positioned at 0)

    Raises:
        NotFoundError: If the path is not an existing directory
    """
    root_entry = await store.stat(virtual_path)
    if not root_entry.is_directory:
        raise NotFoundError(root_entry.path, "Path is not a directory")

    filename = archive_name(root_entry.path)
    prefix = posixpath.splitext(filename)[0]

    buffer = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_SIZE)
    file_count = 0

    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            pending = [root_entry.path]
            visited = set()
            while pending:
                directory = pending.pop()

                # Directory symlinks can point back at an ancestor
                real_directory = os.path.realpath(store.mapper.to_real(directory))
                if real_directory in visited:
                    logger.warning("archive_cycle_skipped", path=directory)
                    continue
                visited.add(real_directory)

                entries = await store.list(directory)

                if not entries and directory != root_entry.path:
                    archive.writestr(
                        _member_name(prefix, root_entry.path, directory) + "/", b""
                    )

                for entry in entries:
                    if entry.is_directory:
                        pending.append(entry.path)
                        continue

                    member = _member_name(prefix, root_entry.path, entry.path)
                    with archive.open(member, "w") as target:
                        async for chunk in store.read_file_stream(entry.path, chunk_size):
                            target.write(chunk)
                    file_count += 1
    except BaseException:
        buffer.close()
        raise

    size = buffer.tell()
    buffer.seek(0)

    archive_size_bytes.observe(size)
    logger.info(
        "archive_built",
        path=root_entry.path,
        files=file_count,
        size_bytes=size,
    )

    return filename, buffer


def _member_name(prefix: str, base: str, virtual_path: str) -> str:
    relative = posixpath.relpath(virtual_path, base)
    return posixpath.join(prefix, relative)
