"""
Scalar helpers shared by the processing kernels.
"""

import math


def three_way_max(a: float, b: float, c: float) -> float:
    """Maximum of three values."""
    return (a if a > c else c) if a > b else (b if b > c else c)


def three_way_min(a: float, b: float, c: float) -> float:
    """Minimum of three values."""
    return (a if a < c else c) if a < b else (b if b < c else c)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding, which would send 0.5 to 0
    and 2.5 to 2.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
