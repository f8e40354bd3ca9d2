"""Percentage math shared by the scoring engine and report formatting."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Python's round() rounds halves to even (round(2.5) == 2). Scores are
    defined with halves rounding up (2.5 -> 3), so use this everywhere a
    percentage becomes an integer.
    """
    return int(math.floor(value + 0.5))


def percentage(count: float, total: float) -> float:
    """
    Unrounded percentage of count over total, 0.0 when total is zero.

    Args:
        count: Numerator (matched keywords, matched weight, ...)
        total: Denominator

    Returns:
        Percentage in [0, 100] for 0 <= count <= total
    """
    if total == 0:
        return 0.0
    return (count / total) * 100
