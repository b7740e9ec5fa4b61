from __future__ import annotations

from .export import mount_export_api
from .files import mount_files_api
from .recent import mount_recent_files_api

__all__ = ["mount_export_api", "mount_files_api", "mount_recent_files_api"]
