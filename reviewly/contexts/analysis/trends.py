"""
Growth trend analysis for the items of one category.

Compares how many high-importance items fall in the older half of the
timeline against the recent half.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Literal, Sequence

from reviewly.contexts.intake.item_data_structure import SummaryItem
from reviewly.utils.timestamp import as_naive_utc, days_between

Growth = Literal["increasing", "stable", "decreasing"]

INCREASE_FACTOR = 1.2
DECREASE_FACTOR = 0.8


@dataclass(frozen=True)
class TrendSummary:
    """
    Direction and density of activity within a category.

    Attributes:
        growth: "increasing", "stable" or "decreasing"
        frequency: Items per day over the timespan (one decimal)
        timespan: Days between first and last item, e.g. "12 days"
    """

    growth: Growth = "stable"
    frequency: float = 0.0
    timespan: str = "0 days"

    def to_dict(self) -> Dict[str, Any]:
        return {"growth": self.growth, "frequency": self.frequency, "timespan": self.timespan}


def _round_one_decimal(value: float) -> float:
    """Round half up to one decimal place (2.25 -> 2.3)."""
    return math.floor(value * 10 + 0.5) / 10


def analyze_growth_trends(items: Sequence[SummaryItem]) -> TrendSummary:
    """
    Compute growth direction, frequency and timespan for one category.

    Items are ordered by timestamp (a sorted copy; the input is untouched) and
    split at len // 2: the first half is "older", the rest "recent", so with an
    odd count the middle item is recent. Growth is "increasing" when recent
    high-importance items exceed 1.2x the older count, "decreasing" when they
    fall below 0.8x, and "stable" otherwise.

    Args:
        items: Items of one category with importance already resolved

    Returns:
        TrendSummary; empty input gives stable / 0 / "0 days"
    """
    if not items:
        return TrendSummary()

    ordered = sorted(items, key=lambda item: as_naive_utc(item.timestamp))
    timespan = max(days_between(ordered[0].timestamp, ordered[-1].timestamp), 0)
    frequency = len(ordered) / max(timespan, 1)

    midpoint = len(ordered) // 2
    older_high = sum(1 for item in ordered[:midpoint] if item.is_high_importance)
    recent_high = sum(1 for item in ordered[midpoint:] if item.is_high_importance)

    growth: Growth = "stable"
    if recent_high > older_high * INCREASE_FACTOR:
        growth = "increasing"
    elif recent_high < older_high * DECREASE_FACTOR:
        growth = "decreasing"

    return TrendSummary(
        growth=growth,
        frequency=_round_one_decimal(frequency),
        timespan=f"{timespan} days",
    )
