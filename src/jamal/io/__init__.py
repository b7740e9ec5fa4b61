from __future__ import annotations

from .documents import (
    FILE_EXTENSION,
    DrawingFile,
    create_drawing_file,
    file_exists,
    file_name_from_path,
    open_drawing,
    open_recent,
    parse_drawing,
    read_file,
    save_drawing,
    save_file,
)
from .export import CairoRasterizer, Rasterizer, compose_on_canvas, export_to_png, save_png, save_svg

__all__ = [
    "FILE_EXTENSION",
    "DrawingFile",
    "create_drawing_file",
    "file_exists",
    "file_name_from_path",
    "open_drawing",
    "open_recent",
    "parse_drawing",
    "read_file",
    "save_drawing",
    "save_file",
    "Rasterizer",
    "CairoRasterizer",
    "compose_on_canvas",
    "export_to_png",
    "save_png",
    "save_svg",
]
