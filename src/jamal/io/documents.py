from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.errors import JamalError, ParseError, StorageError
from ..core.recent import RecentFilesRegistry

FILE_EXTENSION = "jamal"
DRAWING_FORMAT_VERSION = 1


def save_file(path: str | os.PathLike[str], content: str) -> None:
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as ex:
        raise StorageError(f"Failed to save file: {ex}") from ex


def read_file(path: str | os.PathLike[str]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise StorageError(f"Failed to read file: {ex}") from ex


def file_exists(path: str | os.PathLike[str]) -> bool:
    return Path(path).exists()


def file_name_from_path(path: str) -> str:
    """Display name for a document path: last component without the drawing extension."""
    parts = str(path).replace("\\", "/").split("/")
    file_name = parts[-1] or "Untitled"
    return file_name.replace(f".{FILE_EXTENSION}", "", 1)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class DrawingFile:
    """On-disk drawing document. `store` is the editor snapshot, kept opaque."""

    name: str
    store: Any
    created_at: int
    updated_at: int
    version: int = DRAWING_FORMAT_VERSION
    cloud_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": int(self.version),
            "name": self.name,
            "store": self.store,
            "createdAt": int(self.created_at),
            "updatedAt": int(self.updated_at),
            "cloudId": self.cloud_id,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "DrawingFile":
        if not isinstance(data, dict):
            raise ValueError("drawing must be a JSON object")
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("drawing is missing a string `name`")
        if "store" not in data:
            raise ValueError("drawing is missing `store`")
        cloud_id = data.get("cloudId")
        if cloud_id is not None and not isinstance(cloud_id, str):
            raise ValueError("drawing `cloudId` must be a string or null")
        try:
            version = int(data.get("version", DRAWING_FORMAT_VERSION))
            created_at = int(data.get("createdAt", 0))
            updated_at = int(data.get("updatedAt", created_at))
        except (TypeError, ValueError) as ex:
            raise ValueError("drawing has non-integer version or timestamps") from ex
        return cls(
            name=name,
            store=data["store"],
            created_at=created_at,
            updated_at=updated_at,
            version=version,
            cloud_id=cloud_id,
        )


def create_drawing_file(name: str, store: Any, cloud_id: str | None = None) -> DrawingFile:
    now = _now_ms()
    return DrawingFile(name=name, store=store, created_at=now, updated_at=now, cloud_id=cloud_id or None)


def parse_drawing(content: str) -> DrawingFile:
    try:
        return DrawingFile.from_dict(json.loads(content))
    except (ValueError, RecursionError) as ex:
        raise ParseError(f"Failed to parse drawing: {ex}") from ex


def save_drawing(
    path: str,
    name: str,
    store: Any,
    registry: RecentFilesRegistry,
    *,
    cloud_id: str | None = None,
) -> DrawingFile:
    """Write a drawing document and move it to the front of the recent files."""

    drawing = create_drawing_file(name, store, cloud_id)
    save_file(path, json.dumps(drawing.to_dict(), indent=2, ensure_ascii=False))
    registry.upsert(path, name)
    return drawing


def open_drawing(path: str, registry: RecentFilesRegistry) -> DrawingFile:
    drawing = parse_drawing(read_file(path))
    if not drawing.name.strip():
        drawing.name = file_name_from_path(path)
    registry.upsert(path, drawing.name)
    return drawing


def open_recent(path: str, registry: RecentFilesRegistry) -> DrawingFile:
    """Open a drawing from the recent list, forgetting it if it cannot be opened."""

    try:
        return open_drawing(path, registry)
    except JamalError:
        registry.remove(path)
        raise

