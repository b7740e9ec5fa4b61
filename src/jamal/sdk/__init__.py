from __future__ import annotations

from .client import JamalClient

__all__ = ["JamalClient"]
