"""Numeric helpers shared by geometry and pricing."""

from __future__ import annotations

import math
from typing import Any

__all__ = ["round_half_up", "to_number"]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves rounded towards +infinity.

    Python's built-in ``round`` uses banker's rounding, which would make
    ``round(2.5) == 2``. Prices and display heights round halves up.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(197.45, 1)
        197.5
    """
    factor = 10**ndigits
    # Nudge by a tiny epsilon so binary artifacts like 1.0049999 round as 1.005 would.
    return math.floor(value * factor + 0.5 + 1e-9) / factor


def to_number(value: Any) -> float | None:
    """Coerce a fact value to a float for numeric comparisons.

    Numbers are returned as floats and numeric strings are parsed. Booleans,
    blank strings and anything unparsable yield None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None
