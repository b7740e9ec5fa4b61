from __future__ import annotations


def test_top_level_exports() -> None:
    import jamal

    assert jamal.run is not None
    assert jamal.JamalClient is not None
    assert jamal.RecentFilesRegistry is not None
    assert jamal.MAX_RECENT_FILES == 20


def test_package_paths_work() -> None:
    from jamal.api import create_api_app
    from jamal.api.routes import mount_export_api, mount_files_api, mount_recent_files_api
    from jamal.core import InMemoryStore, JsonFileStore, RecentFilesRegistry
    from jamal.io import CairoRasterizer, open_drawing, save_png
    from jamal.runtime import JamalServer, create_app, run
    from jamal.sdk import JamalClient

    assert create_api_app is not None
    assert mount_recent_files_api is not None
    assert mount_files_api is not None
    assert mount_export_api is not None
    assert RecentFilesRegistry is not None
    assert JsonFileStore is not None
    assert InMemoryStore is not None
    assert CairoRasterizer is not None
    assert open_drawing is not None
    assert save_png is not None
    assert JamalServer is not None
    assert create_app is not None
    assert run is not None
    assert JamalClient is not None
