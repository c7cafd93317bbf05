"""Virtual path to real path mapping."""
import posixpath
from pathlib import Path
from typing import Union

from .errors import InvalidPathError
from .path_sanitizer import PathSanitizer


class PathMapper:
    """Maps canonical virtual paths onto a configured root and back."""

    def __init__(self, root: Union[str, Path]):
        """
        Initialize with the real root directory

        Args:
            root: Directory that virtual ``/`` corresponds to
        """
        self.root = posixpath.normpath(str(root))

    def to_real(self, virtual_path: str) -> str:
        """
        Convert a virtual path to a real filesystem path

        Args:
            virtual_path: Virtual path (sanitized again here)

        Returns:
            Real path under the root
        """
        sanitized = PathSanitizer.sanitize(virtual_path)
        relative = sanitized.lstrip("/")

        if not relative:
            return self.root

        return posixpath.join(self.root, relative)

    def to_virtual(self, real_path: Union[str, Path]) -> str:
        """
        Convert a real filesystem path to a virtual path

        Args:
            real_path: Path under the root

        Returns:
            Virtual path starting with ``/``

        Raises:
            InvalidPathError: If the path lies outside the root
        """
        relative = posixpath.relpath(str(real_path), self.root)

        if relative == ".":
            return PathSanitizer.ROOT

        if relative == ".." or relative.startswith("../"):
            raise InvalidPathError("Path is outside the configured root")

        return "/" + relative


def virtual_to_real(virtual_path: str, root: Union[str, Path]) -> str:
    return PathMapper(root).to_real(virtual_path)


def real_to_virtual(real_path: Union[str, Path], root: Union[str, Path]) -> str:
    return PathMapper(root).to_virtual(real_path)
