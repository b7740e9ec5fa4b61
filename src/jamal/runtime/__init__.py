from __future__ import annotations

from .app import create_app
from .server import JamalServer, run

__all__ = ["create_app", "JamalServer", "run"]
