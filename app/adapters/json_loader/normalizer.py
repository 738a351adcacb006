"""Dataset record normalization: coordinates, tags, flags."""

from __future__ import annotations

import math


def clean_string(value: object) -> str | None:
    """Strip whitespace and return None for empty or non-string values."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value if value else None


def parse_coordinate(value: object) -> float | None:
    """Parse a decimal-degree coordinate.

    Accepts numbers and numeric strings (comma or dot decimal separator).
    Booleans, NaN and infinities are rejected.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.replace(",", ".").strip())
        except ValueError:
            return None
    else:
        return None
    return parsed if math.isfinite(parsed) else None


def parse_tags(value: object) -> tuple[str, ...] | None:
    """Return tags as a tuple in dataset order, or None if not a list of strings."""
    if not isinstance(value, list):
        return None
    if not all(isinstance(tag, str) for tag in value):
        return None
    return tuple(value)


def parse_flag(value: object) -> bool | None:
    """Accept JSON booleans and the strings "true"/"false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
    return None
