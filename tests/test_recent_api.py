from __future__ import annotations

from pathlib import Path

import pytest

from jamal.config import load_settings
from jamal.core import JsonFileStore, RecentFilesRegistry


def _skip(msg: str) -> None:  # pragma: no cover
    try:
        import pytest  # type: ignore

        pytest.skip(msg)
    except Exception:
        raise RuntimeError(msg)


@pytest.fixture
def recent_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "recent_files.json"


@pytest.fixture
def client(recent_path: Path):
    from jamal.runtime.app import create_app

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return None

    settings = load_settings(recent_path.parent)
    return TestClient(create_app(settings))


def _paths(res) -> list[tuple[str, str]]:
    return [(f["path"], f["name"]) for f in res.json()]


def test_healthz(client) -> None:
    res = client.get("/healthz")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_get_without_store_is_empty(client, recent_path: Path) -> None:
    res = client.get("/api/recent-files")
    assert res.status_code == 200
    assert res.json() == []
    assert not recent_path.exists()


def test_add_then_readd_moves_to_front(client) -> None:
    assert client.post("/api/recent-files", json={"path": "/a.draw", "name": "A"}).status_code == 200
    assert client.post("/api/recent-files", json={"path": "/b.draw", "name": "B"}).status_code == 200
    assert _paths(client.get("/api/recent-files")) == [("/b.draw", "B"), ("/a.draw", "A")]

    res = client.post("/api/recent-files", json={"path": "/a.draw", "name": "A2"})
    assert res.status_code == 200
    assert res.json()["entry"]["path"] == "/a.draw"

    listed = client.get("/api/recent-files").json()
    assert [(f["path"], f["name"]) for f in listed] == [("/a.draw", "A2"), ("/b.draw", "B")]
    assert all(isinstance(f["last_opened"], int) for f in listed)


def test_add_requires_path_and_name(client) -> None:
    assert client.post("/api/recent-files", json={"name": "A"}).status_code == 400
    assert client.post("/api/recent-files", json={"path": "/a"}).status_code == 400
    assert client.post("/api/recent-files", json={"path": 3, "name": "A"}).status_code == 400


def test_corrupt_store_read_fails_but_add_heals(client, recent_path: Path) -> None:
    recent_path.parent.mkdir(parents=True)
    recent_path.write_text("{not json", encoding="utf-8")

    res = client.get("/api/recent-files")
    assert res.status_code == 500
    assert res.json()["detail"].startswith("Failed to parse recent files")

    assert client.post("/api/recent-files", json={"path": "/c.draw", "name": "C"}).status_code == 200
    assert _paths(client.get("/api/recent-files")) == [("/c.draw", "C")]


def test_remove_and_clear(client, recent_path: Path) -> None:
    for p in ["/a", "/b", "/c"]:
        client.post("/api/recent-files", json={"path": p, "name": p})

    res = client.delete("/api/recent-files", params={"path": "/b"})
    assert res.status_code == 200
    assert [p for p, _ in _paths(client.get("/api/recent-files"))] == ["/c", "/a"]

    for p in ["/a", "/c"]:
        client.delete("/api/recent-files", params={"path": p})
    assert recent_path.exists()
    assert client.get("/api/recent-files").json() == []

    client.post("/api/recent-files", json={"path": "/a", "name": "A"})
    res = client.post("/api/recent-files/clear")
    assert res.status_code == 200
    assert not recent_path.exists()
    assert client.get("/api/recent-files").json() == []


def test_remove_requires_path(client) -> None:
    assert client.delete("/api/recent-files").status_code == 400


def test_prune_drops_missing_documents(client, tmp_path: Path) -> None:
    present = tmp_path / "present.jamal"
    present.write_text("{}", encoding="utf-8")
    client.post("/api/recent-files", json={"path": str(tmp_path / "gone.jamal"), "name": "gone"})
    client.post("/api/recent-files", json={"path": str(present), "name": "present"})

    res = client.post("/api/recent-files/prune")
    assert res.status_code == 200
    assert res.json()["removed"] == 1
    assert _paths(client.get("/api/recent-files")) == [(str(present), "present")]


def test_storage_failure_is_reported(tmp_path: Path) -> None:
    from jamal.api import create_api_app

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return

    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    registry = RecentFilesRegistry(JsonFileStore(blocker / "recent_files.json"))
    client = TestClient(create_api_app(registry=registry))

    res = client.post("/api/recent-files", json={"path": "/a", "name": "A"})
    assert res.status_code == 500
    assert "Failed to create app data directory" in res.json()["detail"]


def test_add_rejects_unencodable_path(client, recent_path: Path) -> None:
    res = client.post(
        "/api/recent-files",
        content=b'{"path": "/x\\ud800", "name": "X"}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert "not valid UTF-8" in res.json()["detail"]
    assert not recent_path.exists()
