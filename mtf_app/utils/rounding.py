"""Half-up rounding helpers used at the serialization boundary."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to the given number of decimals with ties going up.

    Ties at .5 go towards positive infinity (2.5 -> 3, -2.5 -> -2), unlike
    the built-in round() which rounds ties to even. Values too large to
    scale are returned unchanged; at that magnitude they carry no fractional
    digits anyway.

    Args:
        value: Value to round
        digits: Number of decimal places

    Returns:
        Rounded value
    """
    scale = 10 ** digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


def round_strength(value: float) -> int:
    """Round a weighted strength to an integer percentage."""
    return int(round_half_up(value))
