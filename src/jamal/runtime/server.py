from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
from dataclasses import dataclass
from pathlib import Path

import uvicorn

from ..config import load_settings
from ..sdk.client import JamalClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JamalServer:
    host: str
    port: int
    url: str
    data_dir: Path

    def client(self) -> JamalClient:
        return JamalClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    return JamalClient(base_url).is_alive(timeout_s=timeout_s)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    data_dir: str | os.PathLike[str] | None = None,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> JamalServer | JamalClient:
    """Start the backend with a single Python call, or attach to a running one.

    Behavior:
    - If JAMAL_URL is set and reachable, return a `JamalClient` for it unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a backend already answers at http://{host}:{port},
      attach to it unless `new_server=True`.
    - Otherwise start uvicorn in a daemon thread and return a `JamalServer`.

    `port=0` picks a free port. The per-request access log is off by default
    because the front end polls the recent files list.
    """

    env_url = _normalize_base_url(os.getenv("JAMAL_URL", ""))

    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("attaching to jamal backend at %s", env_url)
            return JamalClient(env_url)

    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("attaching to jamal backend at %s", default_url)
            return JamalClient(default_url)

    if port == 0:
        port = _find_free_port(host)

    settings = load_settings(data_dir)
    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=(log_level or settings.log_level).lower(),
        access_log=access_log,
    )
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Give it a moment so a subsequent client probe doesn't race with startup.
    time.sleep(0.05)

    url = f"http://{host}:{port}/"
    logger.info("jamal backend listening on %s (data dir %s)", url, settings.data_dir)
    return JamalServer(host=host, port=port, url=url, data_dir=settings.data_dir)
