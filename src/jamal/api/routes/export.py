from __future__ import annotations

from fastapi import FastAPI, HTTPException
from starlette.responses import Response

from ...core.errors import ExportError, JamalError
from ...io import export
from ...io.export import Rasterizer
from ..parsing import parse_dimension, require_str


def _parse_png_request(body: dict) -> tuple[str, int, int]:
    svg = require_str(body, "svgData")
    width = parse_dimension(body.get("width"), field="width")
    height = parse_dimension(body.get("height"), field="height")
    return svg, width, height


def mount_export_api(app: FastAPI, rasterizer: Rasterizer) -> None:
    """Mount PNG/SVG export endpoints. PNG rendering is delegated to `rasterizer`."""

    @app.post("/api/export/png")
    def export_to_png(body: dict) -> Response:
        try:
            svg, width, height = _parse_png_request(body)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            data = export.export_to_png(svg, width, height, rasterizer)
        except ExportError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return Response(content=data, media_type="image/png")

    @app.post("/api/export/png/save")
    def save_png(body: dict) -> dict[str, bool]:
        try:
            path = require_str(body, "path")
            svg, width, height = _parse_png_request(body)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            export.save_png(path, svg, width, height, rasterizer)
        except ExportError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True}

    @app.post("/api/export/svg/save")
    def save_svg(body: dict) -> dict[str, bool]:
        try:
            path = require_str(body, "path")
            svg = require_str(body, "svgData")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        try:
            export.save_svg(path, svg)
        except JamalError as ex:
            raise HTTPException(status_code=500, detail=str(ex))
        return {"ok": True}
