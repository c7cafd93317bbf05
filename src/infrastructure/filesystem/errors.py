"""Filesystem boundary exceptions."""
from typing import Optional


class FilesystemError(Exception):
    """Base class for virtual filesystem errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class InvalidPathError(FilesystemError, ValueError):
    """Path is malformed or unsafe."""
    pass


class PathTraversalError(InvalidPathError):
    """Path escapes its own root after normalization."""
    pass


class NotFoundError(FilesystemError):
    """Path is well-formed but does not resolve to a usable entry."""

    def __init__(self, path: Optional[str], reason: str = "Path not found"):
        super().__init__(reason, path=path)
        self.reason = reason
