from __future__ import annotations

from .config import Settings, load_settings
from .core.errors import ExportError, JamalError, ParseError, StorageError
from .core.recent import MAX_RECENT_FILES, RecentFile, RecentFilesRegistry, open_registry
from .runtime.server import JamalServer, run
from .sdk.client import JamalClient

__all__ = [
    "run",
    "JamalServer",
    "JamalClient",
    "Settings",
    "load_settings",
    "MAX_RECENT_FILES",
    "RecentFile",
    "RecentFilesRegistry",
    "open_registry",
    "JamalError",
    "StorageError",
    "ParseError",
    "ExportError",
]
