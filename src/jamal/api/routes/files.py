from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from ...core.errors import JamalError, ParseError
from ...core.recent import RecentFilesRegistry
from ...io import documents
from ..parsing import optional_str, require_str


def mount_files_api(app: FastAPI, registry: RecentFilesRegistry) -> None:
    """Mount raw document I/O and drawing open/save endpoints."""

    @app.post("/api/files/save")
    def save_file(body: dict) -> dict[str, bool]:
        try:
            path = require_str(body, "path")
            content = require_str(body, "content", allow_empty=True)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            documents.save_file(path, content)
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True}

    @app.post("/api/files/read")
    def read_file(body: dict) -> dict[str, str]:
        try:
            path = require_str(body, "path")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            return {"content": documents.read_file(path)}
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))

    @app.post("/api/files/exists")
    def file_exists(body: dict) -> dict[str, bool]:
        try:
            path = require_str(body, "path")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return {"exists": documents.file_exists(path)}

    @app.post("/api/drawings/save")
    def save_drawing(body: dict) -> dict[str, Any]:
        try:
            path = require_str(body, "path")
            name = require_str(body, "name", allow_empty=True)
            cloud_id = optional_str(body, "cloudId")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        if "store" not in body:
            raise HTTPException(status_code=400, detail="Missing field: store")
        try:
            drawing = documents.save_drawing(path, name, body["store"], registry, cloud_id=cloud_id)
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True, "createdAt": drawing.created_at, "updatedAt": drawing.updated_at}

    @app.post("/api/drawings/open")
    def open_drawing(body: dict) -> dict[str, Any]:
        try:
            path = require_str(body, "path")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        # fromRecent: forget the entry when the document can no longer be opened.
        opener = documents.open_recent if bool(body.get("fromRecent")) else documents.open_drawing
        try:
            drawing = opener(path, registry)
        except ParseError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return drawing.to_dict()
