"""Filesystem infrastructure module."""
from .errors import FilesystemError, InvalidPathError, NotFoundError, PathTraversalError
from .path_sanitizer import PathSanitizer, sanitize
from .path_mapper import PathMapper, real_to_virtual, virtual_to_real
from .containment import ContainmentChecker, is_contained
from .file_types import FileType, classify
from .types import DirectoryEntry
from .directory_store import DirectoryStore

__all__ = [
    'FilesystemError',
    'InvalidPathError',
    'NotFoundError',
    'PathTraversalError',
    'PathSanitizer',
    'sanitize',
    'PathMapper',
    'virtual_to_real',
    'real_to_virtual',
    'ContainmentChecker',
    'is_contained',
    'FileType',
    'classify',
    'DirectoryEntry',
    'DirectoryStore',
]
