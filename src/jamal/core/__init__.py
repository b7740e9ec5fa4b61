from __future__ import annotations

from .errors import ExportError, JamalError, ParseError, StorageError
from .recent import (
    MAX_RECENT_FILES,
    RecentFile,
    RecentFilesRegistry,
    dump_recent_files,
    open_registry,
    parse_recent_files,
)
from .store import BackingStore, InMemoryStore, JsonFileStore, lock_for

__all__ = [
    "JamalError",
    "StorageError",
    "ParseError",
    "ExportError",
    "MAX_RECENT_FILES",
    "RecentFile",
    "RecentFilesRegistry",
    "dump_recent_files",
    "parse_recent_files",
    "open_registry",
    "BackingStore",
    "JsonFileStore",
    "InMemoryStore",
    "lock_for",
]
