from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .core.recent import MAX_RECENT_FILES

APP_IDENTIFIER = "com.jamal.app"
RECENT_FILES_NAME = "recent_files.json"


def default_data_dir(identifier: str = APP_IDENTIFIER) -> Path:
    """Per-user application data directory for the current platform."""

    home = Path.home()
    if sys.platform.startswith("win"):
        base = os.getenv("APPDATA")
        return (Path(base) if base else home / "AppData" / "Roaming") / identifier
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / identifier
    xdg = os.getenv("XDG_DATA_HOME", "").strip()
    return (Path(xdg) if xdg else home / ".local" / "share") / identifier


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    max_recent_files: int = MAX_RECENT_FILES
    log_level: str = "info"

    @property
    def recent_files_path(self) -> Path:
        return self.data_dir / RECENT_FILES_NAME


def load_settings(data_dir: str | os.PathLike[str] | None = None) -> Settings:
    """Build settings from the environment.

    An explicit `data_dir` wins over JAMAL_DATA_DIR, which wins over the
    platform default.
    """

    if data_dir is None:
        env_dir = os.getenv("JAMAL_DATA_DIR", "").strip()
        resolved = Path(env_dir).expanduser() if env_dir else default_data_dir()
    else:
        resolved = Path(data_dir).expanduser()

    raw_max = os.getenv("JAMAL_MAX_RECENT", "").strip()
    try:
        max_recent = int(raw_max) if raw_max else MAX_RECENT_FILES
    except ValueError as ex:
        raise ValueError(f"JAMAL_MAX_RECENT must be an integer, got {raw_max!r}") from ex
    if max_recent <= 0:
        raise ValueError("JAMAL_MAX_RECENT must be a positive integer")

    log_level = os.getenv("JAMAL_LOG_LEVEL", "info").strip().lower() or "info"

    return Settings(data_dir=resolved, max_recent_files=max_recent, log_level=log_level)
