"""Rule-based spending recommendations."""
import math
from typing import List


HIGH_CHANGE_THRESHOLD = 10.0
LOW_CHANGE_THRESHOLD = -10.0


def round_half_up(value: float) -> int:
    """Round .5 towards +inf (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def recommend(change: float, category: str) -> List[str]:
    """Return two ordered actions for a predicted percent change.

    Thresholds are strict, so exactly +10 and -10 count as stable.
    """
    label = category.lower()
    if change > HIGH_CHANGE_THRESHOLD:
        return [
            f"Consider reducing your {label} spending by {round_half_up(change)}%",
            "Set a weekly budget for this category",
        ]
    if change < LOW_CHANGE_THRESHOLD:
        return [
            f"Your {label} spending is trending down, which is positive",
            "Consider setting aside the savings for your financial goals",
        ]
    return [
        f"Your {label} spending is stable",
        "Continue monitoring your spending patterns",
    ]
