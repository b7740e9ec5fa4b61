from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from ...core.errors import JamalError
from ...core.recent import RecentFilesRegistry
from ..parsing import require_str


def mount_recent_files_api(app: FastAPI, registry: RecentFilesRegistry) -> None:
    """Mount the recent files commands on `app`, backed by `registry`."""

    @app.get("/api/recent-files")
    def get_recent_files() -> list[dict[str, Any]]:
        try:
            return [f.to_dict() for f in registry.get()]
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))

    @app.post("/api/recent-files")
    def add_recent_file(body: dict) -> dict[str, Any]:
        try:
            path = require_str(body, "path")
            name = require_str(body, "name", allow_empty=True)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            entry = registry.upsert(path, name)
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True, "entry": entry.to_dict()}

    @app.delete("/api/recent-files")
    def remove_recent_file(path: str | None = None) -> dict[str, bool]:
        if path is None or not path.strip():
            raise HTTPException(status_code=400, detail="Missing query parameter: path")
        try:
            registry.remove(path)
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True}

    @app.post("/api/recent-files/clear")
    def clear_recent_files() -> dict[str, bool]:
        try:
            registry.clear()
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True}

    @app.post("/api/recent-files/prune")
    def prune_recent_files() -> dict[str, Any]:
        try:
            dropped = registry.prune_missing()
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True, "removed": len(dropped), "paths": [f.path for f in dropped]}
