"""
Small numeric helpers shared by the predictors and the normalizer.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up (not banker's)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))
