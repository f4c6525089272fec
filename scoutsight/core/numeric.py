"""Small numeric helpers shared by the perception models."""

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value to the inclusive range [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    The built-in round() uses banker's rounding, which would make star
    snapping depend on whether the neighbouring integer is even.
    """
    return int(math.floor(value + 0.5))


def snap_to_half(value: float) -> float:
    """Snap a value to the nearest 0.5 increment."""
    return round_half_up(value * 2) / 2
