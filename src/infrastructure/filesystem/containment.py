"""Root containment checks."""
from pathlib import Path
from typing import Any, Union

from .errors import InvalidPathError
from .path_mapper import PathMapper


class ContainmentChecker:
    """Verifies real paths stay within the configured root."""

    @staticmethod
    def is_contained(real_path: Union[str, Path], root: Union[str, Path]) -> bool:
        """
        Check if a real path is the root or lies beneath it.

        Both paths are resolved first, so symlinks pointing out of the
        root are reported as not contained.
        """
        try:
            resolved = Path(real_path).resolve()
            base = Path(root).resolve()

            resolved.relative_to(base)
            return True

        except (ValueError, RuntimeError, OSError, TypeError):
            return False

    @classmethod
    def is_path_safe(cls, input_path: Any, root: Union[str, Path]) -> bool:
        """Check if an untrusted virtual path maps inside the root."""
        try:
            real_path = PathMapper(root).to_real(input_path)
        except InvalidPathError:
            return False

        return cls.is_contained(real_path, root)


def is_contained(real_path: Union[str, Path], root: Union[str, Path]) -> bool:
    return ContainmentChecker.is_contained(real_path, root)
