"""Input shape checks shared by the services."""

from __future__ import annotations

from typing import Any

from app.core.constants import UUID_PATTERN


def is_uuid(value: Any) -> bool:
    """Return True when ``value`` is a string shaped like an RFC 4122 UUID."""
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def clean_filter(value: str | None) -> str:
    """Trim an optional query-string filter; missing values become ``""``."""
    if not isinstance(value, str):
        return ""
    return value.strip()
