"""
Score Summary Utility Module

Aggregation of persisted answer scores into an average and a verdict.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

STRONG_THRESHOLD = 7
AVERAGE_THRESHOLD = 5


def average_score(scores: List[int]) -> float:
    """Arithmetic mean rounded half-up to one decimal place, 0 when there are no scores."""
    if not scores:
        return 0.0
    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def verdict_for(average: float) -> str:
    # Lower bound of each tier is inclusive
    if average >= STRONG_THRESHOLD:
        return "strong"
    if average >= AVERAGE_THRESHOLD:
        return "average"
    return "needs improvement"
