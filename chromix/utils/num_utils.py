import math


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); packed
    color bytes use schoolbook rounding so ``2.5 -> 3`` and ``-2.5 -> -3``.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_unit(value: float) -> bool:
    """True if value is finite and within [0, 1]."""
    return math.isfinite(value) and 0.0 <= value <= 1.0
