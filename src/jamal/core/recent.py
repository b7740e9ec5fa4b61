from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable

from .errors import ParseError
from .store import BackingStore, JsonFileStore, lock_for

logger = logging.getLogger(__name__)

MAX_RECENT_FILES = 20

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class RecentFile:
    """One remembered document. `path` is the unique key."""

    path: str
    name: str
    last_opened: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _entry_from_obj(obj: Any, index: int) -> RecentFile:
    if not isinstance(obj, dict):
        raise ValueError(f"entry {index} is not an object")
    path = obj.get("path")
    name = obj.get("name")
    last_opened = obj.get("last_opened")
    if not isinstance(path, str):
        raise ValueError(f"entry {index}: missing or invalid field `path`")
    if not isinstance(name, str):
        raise ValueError(f"entry {index}: missing or invalid field `name`")
    # bool is an int subclass; reject it like a strict integer field would.
    if isinstance(last_opened, bool) or not isinstance(last_opened, int):
        raise ValueError(f"entry {index}: missing or invalid field `last_opened`")
    if not _I64_MIN <= last_opened <= _I64_MAX:
        raise ValueError(f"entry {index}: `last_opened` out of range")
    # Lone surrogates decode from \u escapes but cannot be written back as UTF-8.
    path.encode("utf-8")
    name.encode("utf-8")
    return RecentFile(path=path, name=name, last_opened=last_opened)


def parse_recent_files(text: str) -> list[RecentFile]:
    """Decode the persisted JSON array. Raises ParseError on anything else."""
    try:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("expected a JSON array")
        return [_entry_from_obj(obj, i) for i, obj in enumerate(data)]
    except (ValueError, RecursionError) as ex:
        raise ParseError(f"Failed to parse recent files: {ex}") from ex


def dump_recent_files(files: list[RecentFile]) -> str:
    return json.dumps([f.to_dict() for f in files], indent=2, ensure_ascii=False)


class RecentFilesRegistry:
    """Bounded most-recently-opened list persisted in a backing store.

    Nothing is cached: every call loads the full list, applies at most one
    mutation and writes the full list back. Mutations of the same store are
    serialized by a process-wide lock keyed on the store.

    Corrupt content is reported by `get()` but replaced with an empty list by
    the mutating calls, which log a warning when that happens.
    """

    def __init__(
        self,
        store: BackingStore,
        *,
        clock: Callable[[], float] = time.time,
        max_files: int = MAX_RECENT_FILES,
    ) -> None:
        if int(max_files) <= 0:
            raise ValueError("max_files must be a positive integer")
        self.store = store
        self.max_files = int(max_files)
        self._clock = clock
        self._lock = lock_for(store.key)

    def now(self) -> int:
        try:
            secs = int(self._clock())
        except (OSError, OverflowError, ValueError):
            return 0
        return secs if secs >= 0 else 0

    def load(self) -> list[RecentFile]:
        if not self.store.exists():
            return []
        return parse_recent_files(self.store.read_text())

    def _load_or_heal(self) -> list[RecentFile]:
        try:
            return self.load()
        except ParseError as ex:
            logger.warning("discarding unreadable recent files list: %s", ex)
            return []

    def _persist(self, files: list[RecentFile]) -> None:
        self.store.write_text(dump_recent_files(files))

    def get(self) -> list[RecentFile]:
        with self._lock:
            return self.load()

    def upsert(self, path: str, name: str) -> RecentFile:
        """Move `path` to the front of the list, evicting from the tail past capacity."""
        with self._lock:
            files = self._load_or_heal()
            files = [f for f in files if f.path != path]
            entry = RecentFile(path=path, name=name, last_opened=self.now())
            files.insert(0, entry)
            del files[self.max_files :]
            self._persist(files)
            logger.debug("recent files: upserted %s (%d entries)", path, len(files))
            return entry

    def remove(self, path: str) -> None:
        with self._lock:
            if not self.store.exists():
                return
            files = [f for f in self._load_or_heal() if f.path != path]
            self._persist(files)

    def clear(self) -> None:
        with self._lock:
            if self.store.exists():
                self.store.delete()

    def prune_missing(self, exists: Callable[[str], bool] = os.path.exists) -> list[RecentFile]:
        """Drop entries whose document is gone. Returns the dropped entries."""
        with self._lock:
            if not self.store.exists():
                return []
            kept: list[RecentFile] = []
            dropped: list[RecentFile] = []
            for f in self._load_or_heal():
                (kept if exists(f.path) else dropped).append(f)
            self._persist(kept)
            return dropped


def open_registry(recent_files_path: str | os.PathLike[str], *, max_files: int = MAX_RECENT_FILES) -> RecentFilesRegistry:
    return RecentFilesRegistry(JsonFileStore(recent_files_path), max_files=max_files)


__all__ = [
    "MAX_RECENT_FILES",
    "RecentFile",
    "RecentFilesRegistry",
    "dump_recent_files",
    "open_registry",
    "parse_recent_files",
]
