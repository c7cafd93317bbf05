"""Common dependencies for API routes."""

from fastapi import Depends, Request

from src.core.config import Settings, get_settings
from src.infrastructure.filesystem import DirectoryStore


def get_settings_dep() -> Settings:
    """Get application settings."""
    return get_settings()


def get_directory_store(
    request: Request,
    settings: Settings = Depends(get_settings_dep)
) -> DirectoryStore:
    """Get the store for the configured data root."""
    store = getattr(request.app.state, "directory_store", None)
    if store is None:
        store = DirectoryStore(settings.data_root)
        request.app.state.directory_store = store
    return store
