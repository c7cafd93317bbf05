"""Directory browsing, file content and download routes."""

import mimetypes
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response, StreamingResponse
from starlette.background import BackgroundTask
import structlog

from src.api.dependencies import get_directory_store, get_settings_dep
from src.api.models.file_models import DirectoryEntryResponse, ItemInfoResponse
from src.core.config import Settings
from src.core.exceptions import (BadRequestError, ErrorResponse,
                                 ResourceNotFoundError)
from src.infrastructure.filesystem import (DirectoryStore, FilesystemError,
                                           InvalidPathError, NotFoundError)
from src.infrastructure.filesystem.archive import build_archive

logger = structlog.get_logger()
router = APIRouter(tags=["files"])

PATH_REQUIRED = "Path parameter is required"

ERROR_RESPONSES = {
    400: {"description": "Invalid path", "model": ErrorResponse},
    404: {"description": "Path not found", "model": ErrorResponse},
}


def _require_path(path: Optional[str]) -> str:
    if not path:
        raise BadRequestError(error=PATH_REQUIRED, message=PATH_REQUIRED)
    return path


def _invalid(path: str, exc: InvalidPathError) -> BadRequestError:
    return BadRequestError(error="Invalid path", message=exc.message, path=path)


def _not_found(error: str, path: str, exc: FilesystemError) -> ResourceNotFoundError:
    return ResourceNotFoundError(error=error, message=exc.message, path=exc.path or path)


def _content_disposition(filename: str) -> str:
    return f"attachment; filename*=UTF-8''{quote(filename)}"


@router.get(
    "/list",
    response_model=List[DirectoryEntryResponse],
    summary="List directory",
    description="List the immediate children of a directory, folders first",
    responses=ERROR_RESPONSES,
)
async def list_directory(
    path: str = Query("/", description="Virtual directory path"),
    store: DirectoryStore = Depends(get_directory_store)
) -> List[DirectoryEntryResponse]:
    """List a directory."""
    path = path or "/"

    try:
        entries = await store.list(path)
    except InvalidPathError as e:
        raise _invalid(path, e)
    except NotFoundError as e:
        raise _not_found("Directory not found", path, e)

    return [DirectoryEntryResponse.from_entry(entry) for entry in entries]


@router.get(
    "/file",
    response_class=Response,
    summary="Read file",
    description="Return raw file content as text/plain",
    responses=ERROR_RESPONSES,
)
async def read_file(
    path: Optional[str] = Query(None, description="Virtual file path"),
    store: DirectoryStore = Depends(get_directory_store)
) -> Response:
    """Return file content."""
    path = _require_path(path)

    try:
        content = await store.read_file(path)
    except (InvalidPathError, NotFoundError) as e:
        raise _not_found("File not found", path, e)

    return Response(content=content, media_type="text/plain; charset=utf-8")


@router.get(
    "/info",
    response_model=ItemInfoResponse,
    summary="Item info",
    description="Metadata for a single file or directory",
    responses=ERROR_RESPONSES,
)
async def get_item_info(
    path: Optional[str] = Query(None, description="Virtual path"),
    store: DirectoryStore = Depends(get_directory_store)
) -> ItemInfoResponse:
    """Return metadata for one item."""
    path = _require_path(path)

    try:
        entry = await store.stat(path)
    except InvalidPathError as e:
        raise _invalid(path, e)
    except NotFoundError as e:
        raise _not_found("Item not found", path, e)

    return ItemInfoResponse.from_entry(entry)


@router.get(
    "/download",
    response_class=StreamingResponse,
    summary="Download",
    description="Download a file, or a directory as a ZIP archive",
    responses=ERROR_RESPONSES,
)
async def download(
    path: Optional[str] = Query(None, description="Virtual path"),
    store: DirectoryStore = Depends(get_directory_store),
    settings: Settings = Depends(get_settings_dep)
) -> StreamingResponse:
    """Stream a file or a directory archive."""
    path = _require_path(path)
    chunk_size = settings.download_chunk_size

    try:
        entry = await store.stat(path)

        if entry.is_directory:
            filename, archive = await build_archive(store, entry.path, chunk_size)
        else:
            filename, archive = entry.name, None
    except (InvalidPathError, NotFoundError) as e:
        raise _not_found("Download not available", path, e)

    logger.info("download_started", path=entry.path, archive=archive is not None)

    if archive is not None:
        return StreamingResponse(
            iter(lambda: archive.read(chunk_size), b""),
            media_type="application/zip",
            headers={"Content-Disposition": _content_disposition(filename)},
            background=BackgroundTask(archive.close),
        )

    media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return StreamingResponse(
        store.read_file_stream(entry.path, chunk_size),
        media_type=media_type,
        headers={"Content-Disposition": _content_disposition(filename)},
    )
