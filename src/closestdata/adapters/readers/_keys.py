"""Dotted sub-key lookup shared by the structured-document readers."""

from __future__ import annotations

from typing import Any


def lookup_key(document: Any, key: str | None) -> Any:
    """Return document[k1][k2]... for key "k1.k2...", or None if any is missing.

    Args:
        document: Parsed document (nested dicts).
        key: Dotted key path, or None to return the whole document.

    Returns:
        The selected value, or None when the path does not exist.
    """
    if key is None:
        return document
    value = document
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value
