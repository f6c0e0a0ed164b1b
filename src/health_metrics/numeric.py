"""Numeric helpers shared by the calculators."""
import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round to `decimals` places with ties going toward positive infinity.

    Matches the dashboard's historical rounding (floor(x * 10^d + 0.5) / 10^d)
    rather than Python's banker's rounding, so results agree with
    previously published values.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
