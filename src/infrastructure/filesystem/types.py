"""Directory entry value objects."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .file_types import FileType


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@dataclass(frozen=True)
class DirectoryEntry:
    """Metadata for a single file or directory."""
    name: str
    path: str
    is_directory: bool
    size: Optional[int]
    last_modified: datetime
    type: FileType

    @property
    def last_modified_iso(self) -> str:
        return format_timestamp(self.last_modified)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "isDirectory": self.is_directory,
            "size": self.size,
            "lastModified": self.last_modified_iso,
            "type": self.type.value,
        }
