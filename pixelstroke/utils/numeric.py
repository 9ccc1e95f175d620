"""Integer arithmetic helpers.

Pixel geometry here follows integer conventions where division and
float-to-int conversion truncate towards zero (not towards negative
infinity as Python's ``//`` and ``math.floor`` do). These helpers make the
distinction explicit at the call sites.
"""

from __future__ import annotations


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating towards zero.

    Example:
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def trunc(value: float) -> int:
    """Convert to int truncating towards zero."""
    return int(value)
