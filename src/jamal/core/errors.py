from __future__ import annotations


class JamalError(Exception):
    """Base class for errors surfaced to the front end as a readable message."""


class StorageError(JamalError):
    """Creating, reading, writing or deleting a file failed."""


class ParseError(JamalError):
    """Persisted content is not valid for the expected format."""


class ExportError(JamalError):
    """Rasterizing or encoding an export failed."""
