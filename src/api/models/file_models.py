"""Request/response models for the file browsing API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.infrastructure.filesystem import DirectoryEntry, FileType, PathSanitizer


class DirectoryEntryResponse(BaseModel):
    """A single file or directory."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "test.log",
                "path": "/test.log",
                "isFolder": False,
                "isDirectory": False,
                "size": 1234,
                "lastModified": "2024-01-17T10:00:00.000Z",
                "type": "log"
            }
        }
    )

    name: str = Field(..., description="Entry name")
    path: str = Field(..., description="Virtual path")
    is_folder: bool = Field(..., alias="isFolder", description="Whether the entry is a directory")
    is_directory: bool = Field(..., alias="isDirectory", description="Whether the entry is a directory")
    size: Optional[int] = Field(None, description="Size in bytes, null for directories")
    last_modified: str = Field(..., alias="lastModified", description="ISO-8601 modification time")
    type: FileType = Field(..., description="File type tag")

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> "DirectoryEntryResponse":
        return cls(
            name=entry.name,
            path=entry.path,
            is_folder=entry.is_directory,
            is_directory=entry.is_directory,
            size=entry.size,
            last_modified=entry.last_modified_iso,
            type=entry.type,
        )


class ItemInfoResponse(DirectoryEntryResponse):
    """Entry metadata with its parent directory."""
    parent: Optional[str] = Field(None, description="Parent virtual path, null for the root")

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> "ItemInfoResponse":
        base = DirectoryEntryResponse.from_entry(entry)
        parent = None
        if entry.path != PathSanitizer.ROOT:
            parent = PathSanitizer.get_parent_dir(entry.path)
        return cls(**base.model_dump(), parent=parent)


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str


class AboutResponse(BaseModel):
    name: str
    version: str
    description: str
