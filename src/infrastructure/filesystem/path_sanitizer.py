"""Path security validation module."""
import posixpath
import re
from typing import Any

from .errors import InvalidPathError, PathTraversalError


class PathSanitizer:
    """Turns untrusted path strings into canonical virtual paths."""

    ROOT = "/"

    FORBIDDEN_CHARACTERS = re.compile(r'[<>:"|?*]')
    CONTROL_CHARACTERS = re.compile(r'[\x00-\x1f]')
    RESERVED_NAMES = re.compile(
        r'^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\..*)?$', re.IGNORECASE
    )
    DUPLICATE_SLASHES = re.compile(r'/+')

    @classmethod
    def sanitize(cls, input_path: Any) -> str:
        """
        Normalize and validate a client supplied path.

        Internal ``..`` segments are resolved against the path's own
        components; a ``..`` that survives normalization is rejected.

        Args:
            input_path: Raw path string from the client

        Returns:
            Canonical virtual path, always starting with ``/``

        Raises:
            InvalidPathError: If the path is empty, malformed or unsafe
        """
        if not input_path or not isinstance(input_path, str):
            raise InvalidPathError(
                "Invalid path parameter: must be a non-empty string"
            )

        if "\0" in input_path:
            raise InvalidPathError(
                "Invalid path parameter: contains null bytes"
            )

        sanitized = posixpath.normpath(input_path)
        if sanitized == ".":
            sanitized = cls.ROOT

        if ".." in sanitized.split("/"):
            raise PathTraversalError(
                "Invalid path parameter: path traversal not allowed"
            )

        if not sanitized.startswith("/"):
            sanitized = "/" + sanitized

        sanitized = cls.DUPLICATE_SLASHES.sub("/", sanitized)

        if len(sanitized) > 1 and sanitized.endswith("/"):
            sanitized = sanitized[:-1]

        cls._check_forbidden_patterns(sanitized)

        return sanitized

    @classmethod
    def is_valid(cls, input_path: Any) -> bool:
        """Check if a path sanitizes without error."""
        try:
            cls.sanitize(input_path)
            return True
        except InvalidPathError:
            return False

    @classmethod
    def get_file_name(cls, path: str) -> str:
        """Last component of a path."""
        return posixpath.basename(path)

    @classmethod
    def get_parent_dir(cls, path: str) -> str:
        """Parent directory of a path; top-level items report the root."""
        parent = posixpath.dirname(path)
        return cls.ROOT if parent in ("", ".") else parent

    @classmethod
    def safe_join(cls, *segments: str) -> str:
        """Join path segments and sanitize the result."""
        return cls.sanitize(posixpath.join(*segments))

    @classmethod
    def _check_forbidden_patterns(cls, path: str) -> None:
        for pattern in (cls.FORBIDDEN_CHARACTERS, cls.CONTROL_CHARACTERS):
            if pattern.search(path):
                raise InvalidPathError(
                    f"Invalid path parameter: contains forbidden pattern "
                    f"{pattern.pattern}"
                )

        for component in path.split("/"):
            if cls.RESERVED_NAMES.match(component):
                raise InvalidPathError(
                    f"Invalid path parameter: contains forbidden pattern "
                    f"{cls.RESERVED_NAMES.pattern}"
                )


def sanitize(input_path: Any) -> str:
    """Module-level shortcut for :meth:`PathSanitizer.sanitize`."""
    return PathSanitizer.sanitize(input_path)
