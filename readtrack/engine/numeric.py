import math


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 away from zero on the positive side (2.5 → 3, -2.5 → -2)."""
    return math.floor(value + 0.5)


def clamped_percentage(current: float, target: float) -> int:
    """current/target as a whole percentage clamped to [0, 100]. Never NaN."""
    if target <= 0:
        return 100 if current >= target else 0
    pct = round_half_up(current / target * 100)
    return max(0, min(100, pct))
