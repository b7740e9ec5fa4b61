from __future__ import annotations

import logging

from fastapi import FastAPI

from ..api import create_api_app
from ..config import Settings, load_settings
from ..core.recent import RecentFilesRegistry
from ..io.export import Rasterizer

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    registry: RecentFilesRegistry | None = None,
    rasterizer: Rasterizer | None = None,
) -> FastAPI:
    """Create the full backend app for the desktop front end."""

    settings = settings or load_settings()
    app = create_api_app(settings=settings, registry=registry, rasterizer=rasterizer)
    logger.debug("recent files stored at %s", settings.recent_files_path)
    return app
