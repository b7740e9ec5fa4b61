from __future__ import annotations

import logging
import os
from io import BytesIO
from pathlib import Path
from typing import Protocol

from ..core.errors import ExportError, StorageError

logger = logging.getLogger(__name__)


class Rasterizer(Protocol):
    """Capability turning SVG markup into PNG bytes of the given size."""

    def render(self, svg: str, width: int, height: int) -> bytes: ...


def _coerce_size(width: object, height: object) -> tuple[int, int]:
    try:
        w = int(width)  # type: ignore[arg-type]
        h = int(height)  # type: ignore[arg-type]
    except (TypeError, ValueError) as ex:
        raise ValueError("width and height must be integers") from ex
    if w < 0 or h < 0:
        raise ValueError("width and height must be non-negative")
    return w, h


def compose_on_canvas(png: bytes, width: int, height: int) -> bytes:
    """Place a rendered PNG at the origin of a transparent `width` x `height` canvas.

    A zero dimension keeps the rendered image's own size on that axis. The
    drawing is neither scaled nor centered; anything past the canvas is cropped.
    """

    from PIL import Image  # type: ignore

    with Image.open(BytesIO(png)) as src:
        img = src.convert("RGBA")

    w = width if width > 0 else img.width
    h = height if height > 0 else img.height
    if (w, h) != img.size:
        canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
        canvas.paste(img, (0, 0))
        img = canvas

    buf = BytesIO()
    img.save(buf, format="PNG")
    return bytes(buf.getvalue())


class CairoRasterizer:
    """Render with cairosvg at the SVG's intrinsic size, then fit the canvas with Pillow."""

    def render(self, svg: str, width: int, height: int) -> bytes:
        import cairosvg  # type: ignore

        w, h = _coerce_size(width, height)
        try:
            png = cairosvg.svg2png(bytestring=svg.encode("utf-8"))
        except Exception as ex:
            raise ExportError(f"Failed to parse SVG: {ex}") from ex
        if not png:
            raise ExportError("Failed to create pixmap")
        try:
            return compose_on_canvas(png, w, h)
        except (OSError, ValueError) as ex:
            raise ExportError(f"Failed to encode PNG: {ex}") from ex


def export_to_png(svg: str, width: int, height: int, rasterizer: Rasterizer) -> bytes:
    w, h = _coerce_size(width, height)
    data = rasterizer.render(svg, w, h)
    logger.debug("rendered %dx%d png (%d bytes)", w, h, len(data))
    return data


def save_png(
    path: str | os.PathLike[str],
    svg: str,
    width: int,
    height: int,
    rasterizer: Rasterizer,
) -> None:
    data = export_to_png(svg, width, height, rasterizer)
    try:
        Path(path).write_bytes(data)
    except OSError as ex:
        raise StorageError(f"Failed to save PNG: {ex}") from ex


def save_svg(path: str | os.PathLike[str], svg: str) -> None:
    try:
        Path(path).write_text(svg, encoding="utf-8")
    except OSError as ex:
        raise StorageError(f"Failed to save SVG: {ex}") from ex
