from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, load_settings
from ..core.recent import RecentFilesRegistry, open_registry
from ..io.export import CairoRasterizer, Rasterizer
from .routes import mount_export_api, mount_files_api, mount_recent_files_api


def create_api_app(
    *,
    settings: Settings | None = None,
    registry: RecentFilesRegistry | None = None,
    rasterizer: Rasterizer | None = None,
) -> FastAPI:
    if registry is None:
        settings = settings or load_settings()
        registry = open_registry(settings.recent_files_path, max_files=settings.max_recent_files)
    if rasterizer is None:
        rasterizer = CairoRasterizer()

    app = FastAPI(title="jamal", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:1420",
            "http://127.0.0.1:1420",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_recent_files_api(app, registry)
    mount_files_api(app, registry)
    mount_export_api(app, rasterizer)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
