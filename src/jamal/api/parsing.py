from __future__ import annotations

from typing import Any


def require_str(body: Any, field: str, *, allow_empty: bool = False) -> str:
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    value = body.get(field)
    if value is None:
        raise ValueError(f"Missing field: {field}")
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}: expected a string")
    if not allow_empty and not value.strip():
        raise ValueError(f"{field} cannot be empty")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as ex:
        raise ValueError(f"Invalid {field}: not valid UTF-8 text") from ex
    return value


def optional_str(body: dict, field: str) -> str | None:
    value = body.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}: expected a string")
    return value


def parse_dimension(value: Any, *, field: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}")
    try:
        out = int(value)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"Invalid {field}") from ex
    if out < 0 or out != float(value):
        raise ValueError(f"Invalid {field}")
    return out
