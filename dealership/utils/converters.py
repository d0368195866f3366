"""Conversion helpers for rows coming back from Supabase.

Numeric columns may arrive as int, float, numeric strings or null depending
on how the row was written; filtering and sorting go through these helpers.
"""

from typing import Any


def safe_float(val: Any, default: float = 0.0) -> float:
    """Convert a value to float, or return ``default``.

    Examples:
        >>> safe_float("15900.50")
        15900.5
        >>> safe_float(None)
        0.0
        >>> safe_float("n/a", default=-1.0)
        -1.0
    """
    if val is None or val == "":
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


def safe_int(val: Any, default: int = 0) -> int:
    """Convert a value to int, accepting float strings like ``"2019.0"``.

    Examples:
        >>> safe_int("2019")
        2019
        >>> safe_int(None)
        0
    """
    if val is None or val == "":
        return default
    try:
        return int(float(val))
    except (ValueError, TypeError):
        return default


def as_rows(data: Any) -> list[dict[str, Any]]:
    """Keep only dict rows from a Supabase response payload."""
    if not isinstance(data, list):
        return []
    return [row for row in data if isinstance(row, dict)]


def first_row(data: Any) -> dict[str, Any] | None:
    """First row of an insert/update/select response, or None when empty."""
    rows = as_rows(data)
    return rows[0] if rows else None
