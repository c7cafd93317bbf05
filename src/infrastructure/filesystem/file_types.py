"""File type classification by extension."""
import posixpath
from enum import Enum


class FileType(str, Enum):
    """Display category of a directory entry."""

    FOLDER = "folder"
    FILE = "file"
    LOG = "log"
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    HTML = "html"
    MARKDOWN = "markdown"
    PDF = "pdf"
    IMAGE = "image"
    CONFIG = "config"


EXTENSION_TYPES = {
    "log": FileType.LOG,
    "txt": FileType.TEXT,
    "json": FileType.JSON,
    "yml": FileType.YAML,
    "yaml": FileType.YAML,
    "xml": FileType.XML,
    "html": FileType.HTML,
    "md": FileType.MARKDOWN,
    "pdf": FileType.PDF,
    "png": FileType.IMAGE,
    "jpg": FileType.IMAGE,
    "jpeg": FileType.IMAGE,
    "gif": FileType.IMAGE,
    "env": FileType.CONFIG,
}


def classify(name: str, is_directory: bool) -> FileType:
    """
    Derive the file type tag for an entry.

    Raises:
        TypeError: If name is not a string
    """
    if not isinstance(name, str):
        raise TypeError(
            f"name must be a string, not {type(name).__name__}"
        )

    if is_directory:
        return FileType.FOLDER

    extension = posixpath.splitext(name)[1].lower().lstrip(".")
    return EXTENSION_TYPES.get(extension, FileType.FILE)
