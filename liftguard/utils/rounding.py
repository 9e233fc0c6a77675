"""Rounding helpers.

Python's built-in round() uses banker's rounding. Training numbers are
always rounded half-up so that 2.5 sets becomes 3 and 101.25kg becomes 102.5kg.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return math.floor(value + 0.5)


def round_to_increment(value: float, increment: float) -> float:
    """Round value half-up to the nearest multiple of increment."""
    return round_half_up(value / increment) * increment
