"""Conversion of scalar values to SQL literal text."""

from __future__ import annotations

from typing import Any


def stringify(value: Any) -> str | None:
    """Return the SQL literal for a scalar value, or None if it has none.

    Booleans become ``1``/``0``, integers decimal text, floats fixed
    notation with six fractional digits and strings are double quoted.
    Embedded quotes are not escaped.
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return f'"{value}"'
    return None
