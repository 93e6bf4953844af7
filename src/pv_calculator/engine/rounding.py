"""
Rounding helpers shared by the engine and display formatting.

Non-finite values pass through unchanged.
"""
import math

# Daily rates are always rounded up to this step
RATE_STEP = 50


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves toward +inf."""
    if not math.isfinite(value):
        return value
    # floor(value + 0.5) is off when the addition itself rounds
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def round_up_to_step(value: float, step: int = RATE_STEP) -> float:
    """Round up to the next multiple of step. Never rounds down."""
    if not math.isfinite(value):
        return value
    return math.ceil(value / step) * step
