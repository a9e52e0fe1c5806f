"""
Category Aggregator.

This module reduces the graded items of one category into a single
fraction, applying the category's drop-lowest policy.
"""

import math
from typing import Optional

from ..models import CategoryResult
from ..log import get_logger
from .normalize import fractional_score, to_number

logger = get_logger("engines.category")


class CategoryAggregator:
    """
    Averages the scored items of a single category.

    DROP-LOWEST:
    ------------
    Items are ordered by fractional score (score / max_score), lowest
    first, and the first ``drop_lowest`` of them are excluded. The sort is
    stable, so ties keep their input order and repeated calls always drop
    the same items.

    If ``drop_lowest`` would remove every item, the single highest-scoring
    item is kept instead: a category with graded work never collapses back
    to "not yet assessed".

    WEIGHTING:
    ----------
    The average is points-based, not a mean of percentages:

        fraction = Σ(score_i · w_i) / Σ(max_score_i · w_i)

    An item without a weight takes an equal share, 1 / (items kept).

    Example (Homework, drop_lowest=1):
        items  = [50/100, 100/100, 0/100]
        sorted = [0/100, 50/100, 100/100]
        kept   = [50/100, 100/100]  ->  fraction 0.75
    """

    def aggregate(self, name: str, weight: float, items: list,
                  drop_lowest: int = 0) -> CategoryResult:
        """
        Aggregate one category.

        Args:
            name: Category name (carried into the result)
            weight: Category weight (carried into the result)
            items: List of ScoredItem
            drop_lowest: Number of lowest-scoring items to exclude

        Returns:
            CategoryResult; ``fraction`` is None when ``items`` is empty
        """
        if not items:
            return CategoryResult(name=name, weight=weight, fraction=None)

        drop_count = int(to_number(drop_lowest, label="drop_lowest"))
        if drop_count >= len(items):
            logger.debug(
                "Category %r drops %d of %d items, keeping the highest",
                name, drop_count, len(items),
            )
            drop_count = len(items) - 1

        ranked = sorted(items, key=lambda item: fractional_score(item.score, item.max_score))
        dropped = ranked[:drop_count]
        kept = ranked[drop_count:]

        return CategoryResult(
            name=name,
            weight=weight,
            fraction=self._weighted_fraction(kept),
            kept_items=kept,
            dropped_items=dropped,
        )

    def aggregate_fraction(self, items: list, drop_lowest: int = 0) -> Optional[float]:
        """Shortcut returning only the fraction (None if not yet assessed)."""
        return self.aggregate("", 0.0, items, drop_lowest).fraction

    @staticmethod
    def _weighted_fraction(items: list) -> float:
        equal_share = 1 / len(items)

        earned = 0.0
        possible = 0.0
        for item in items:
            item_weight = item.weight or equal_share
            # An item with no points possible scores 0, whatever it recorded
            if item.max_score > 0:
                earned += item.score * item_weight
                possible += item.max_score * item_weight

        if possible <= 0:
            return 0.0
        fraction = earned / possible
        # Huge finite scores can overflow both sums to inf
        if not math.isfinite(fraction):
            logger.warning("Non-finite fraction from %d items, reporting 0", len(items))
            return 0.0
        return fraction
