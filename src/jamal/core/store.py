from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import threading
import weakref
from pathlib import Path
from typing import Protocol

from .errors import StorageError

logger = logging.getLogger(__name__)

_LOCKS_GUARD = threading.Lock()
# Entries live as long as some registry holds the lock.
_LOCKS: weakref.WeakValueDictionary[str, threading.RLock] = weakref.WeakValueDictionary()


def lock_for(key: str) -> threading.RLock:
    """Return the process-wide lock guarding the resource identified by `key`."""
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = threading.RLock()
            _LOCKS[key] = lock
        return lock


class BackingStore(Protocol):
    """A single named resource holding serialized text."""

    @property
    def key(self) -> str: ...

    def exists(self) -> bool: ...

    def read_text(self) -> str: ...

    def write_text(self, text: str) -> None: ...

    def delete(self) -> None: ...


class JsonFileStore:
    """Backing store living in one UTF-8 file.

    The parent directory is created on every write. Writes go to a temp file in
    the same directory which is then moved over the target, so readers never
    see a partially written file.
    """

    def __init__(self, path: str | os.PathLike[str], *, label: str = "recent files") -> None:
        self.path = Path(path)
        self.label = label

    @property
    def key(self) -> str:
        return str(self.path.resolve())

    def exists(self) -> bool:
        return self.path.exists()

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as ex:
            raise StorageError(f"Failed to read {self.label}: {ex}") from ex

    def write_text(self, text: str) -> None:
        parent = self.path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as ex:
            raise StorageError(f"Failed to create app data directory: {ex}") from ex

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=str(parent))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, UnicodeEncodeError) as ex:
            raise StorageError(f"Failed to save {self.label}: {ex}") from ex
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
        logger.debug("wrote %d bytes to %s", len(text), self.path)

    def delete(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as ex:
            raise StorageError(f"Failed to clear {self.label}: {ex}") from ex
        logger.debug("deleted %s", self.path)


class InMemoryStore:
    """Backing store kept in a string; `None` means the resource does not exist."""

    def __init__(self, text: str | None = None, *, key: str | None = None) -> None:
        self.text = text
        self._key = key or f"memory:{id(self):x}"
        self.writes = 0

    @property
    def key(self) -> str:
        return self._key

    def exists(self) -> bool:
        return self.text is not None

    def read_text(self) -> str:
        if self.text is None:
            raise StorageError("Failed to read recent files: resource does not exist")
        return self.text

    def write_text(self, text: str) -> None:
        self.text = text
        self.writes += 1

    def delete(self) -> None:
        self.text = None

