from __future__ import annotations

from typing import Any

import httpx

from ..core.recent import RecentFile


class JamalClient:
    """HTTP client for a running jamal backend.

    Every method maps to one command route and raises `RuntimeError` carrying
    the status code and the server's message when the command fails.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self, timeout_s: float) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=self._transport)

    @staticmethod
    def _check(res: httpx.Response, what: str) -> httpx.Response:
        if res.status_code >= 400:
            detail: Any = res.text
            try:
                detail = res.json().get("detail", detail)
            except (ValueError, AttributeError):
                pass
            raise RuntimeError(f"{what} failed: {res.status_code} {detail}")
        return res

    def _post(self, url: str, body: dict[str, Any], what: str, *, timeout_s: float) -> httpx.Response:
        with self._client(timeout_s) as client:
            return self._check(client.post(url, json=body), what)

    def is_alive(self, *, timeout_s: float = 0.2) -> bool:
        try:
            with self._client(timeout_s) as client:
                r = client.get("/healthz")
                if r.status_code != 200:
                    return False
                return bool(r.json().get("ok"))
        except (httpx.HTTPError, ValueError):
            return False

    # Recent files

    def get_recent_files(self, *, timeout_s: float = 10.0) -> list[RecentFile]:
        with self._client(timeout_s) as client:
            res = self._check(client.get("/api/recent-files"), "get_recent_files")
        return [
            RecentFile(path=str(f["path"]), name=str(f["name"]), last_opened=int(f["last_opened"]))
            for f in res.json()
        ]

    def add_recent_file(self, path: str, name: str, *, timeout_s: float = 10.0) -> None:
        self._post("/api/recent-files", {"path": path, "name": name}, "add_recent_file", timeout_s=timeout_s)

    def remove_recent_file(self, path: str, *, timeout_s: float = 10.0) -> None:
        with self._client(timeout_s) as client:
            self._check(client.delete("/api/recent-files", params={"path": path}), "remove_recent_file")

    def clear_recent_files(self, *, timeout_s: float = 10.0) -> None:
        self._post("/api/recent-files/clear", {}, "clear_recent_files", timeout_s=timeout_s)

    def prune_recent_files(self, *, timeout_s: float = 10.0) -> list[str]:
        res = self._post("/api/recent-files/prune", {}, "prune_recent_files", timeout_s=timeout_s)
        return [str(p) for p in res.json().get("paths", [])]

    # Documents

    def save_file(self, path: str, content: str, *, timeout_s: float = 60.0) -> None:
        self._post("/api/files/save", {"path": path, "content": content}, "save_file", timeout_s=timeout_s)

    def read_file(self, path: str, *, timeout_s: float = 60.0) -> str:
        res = self._post("/api/files/read", {"path": path}, "read_file", timeout_s=timeout_s)
        return str(res.json()["content"])

    def file_exists(self, path: str, *, timeout_s: float = 10.0) -> bool:
        res = self._post("/api/files/exists", {"path": path}, "file_exists", timeout_s=timeout_s)
        return bool(res.json().get("exists"))

    def save_drawing(
        self,
        path: str,
        name: str,
        store: Any,
        *,
        cloud_id: str | None = None,
        timeout_s: float = 60.0,
    ) -> None:
        body = {"path": path, "name": name, "store": store, "cloudId": cloud_id}
        self._post("/api/drawings/save", body, "save_drawing", timeout_s=timeout_s)

    def open_drawing(self, path: str, *, from_recent: bool = False, timeout_s: float = 60.0) -> dict[str, Any]:
        body = {"path": path, "fromRecent": bool(from_recent)}
        res = self._post("/api/drawings/open", body, "open_drawing", timeout_s=timeout_s)
        return dict(res.json())

    # Export

    def export_to_png(self, svg_data: str, width: int, height: int, *, timeout_s: float = 60.0) -> bytes:
        body = {"svgData": svg_data, "width": int(width), "height": int(height)}
        res = self._post("/api/export/png", body, "export_to_png", timeout_s=timeout_s)
        return bytes(res.content)

    def save_png(self, path: str, svg_data: str, width: int, height: int, *, timeout_s: float = 60.0) -> None:
        body = {"path": path, "svgData": svg_data, "width": int(width), "height": int(height)}
        self._post("/api/export/png/save", body, "save_png", timeout_s=timeout_s)

    def save_svg(self, path: str, svg_data: str, *, timeout_s: float = 60.0) -> None:
        self._post("/api/export/svg/save", {"path": path, "svgData": svg_data}, "save_svg", timeout_s=timeout_s)
