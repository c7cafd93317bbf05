"""API models package."""

from src.api.models.file_models import (
    AboutResponse,
    DirectoryEntryResponse,
    HealthResponse,
    ItemInfoResponse,
)

__all__ = [
    "AboutResponse",
    "DirectoryEntryResponse",
    "HealthResponse",
    "ItemInfoResponse",
]
