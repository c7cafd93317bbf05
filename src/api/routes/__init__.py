"""API routes package."""

from src.api.routes import files

__all__ = [
    "files",
]
