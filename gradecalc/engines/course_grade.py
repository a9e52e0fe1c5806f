"""
Course Grade Calculator.

This module combines per-category fractions into one overall course
percentage, honoring category weights.
"""

from typing import Optional

from ..config import DEFAULT_MAX_SCORE
from ..log import get_logger
from ..models import (
    CourseGradeResult,
    GradeEntry,
    GradeStatus,
    LatePolicy,
    ScoredItem,
)
from .category import CategoryAggregator
from .normalize import is_blank, round2, to_number, to_weight
from .penalty import apply_late_penalty

logger = get_logger("engines.course_grade")


class CourseGradeCalculator:
    """
    Computes a course percentage from its categories and recorded grades.

    ═══════════════════════════════════════════════════════════════════════════
    WEIGHT NORMALIZATION
    ═══════════════════════════════════════════════════════════════════════════

    Only categories with graded work ("assessed" categories) count:

        percentage = Σ(fraction_c · weight_c) / Σ(weight_c) · 100

    where both sums run over assessed categories. Consequences:

    - Weights summing to 100 with everything graded: the plain weighted sum.
    - Weights that do not sum to 100: rescaled to 100.
    - Early semester (Exams 50% ungraded, Homework 50% at 100%):
      100.00, not 50.00. The grade reflects graded work only instead of
      being diluted by categories that have nothing in them yet.
    - Nothing graded at all: 0.

    Categories with a weight of 0 are ignored entirely.
    ═══════════════════════════════════════════════════════════════════════════

    The calculator is pure: inputs are never mutated and identical inputs
    always give identical results.
    """

    def __init__(self, aggregator: Optional[CategoryAggregator] = None):
        self.aggregator = aggregator or CategoryAggregator()

    def calculate(self, categories: list, grade_entries: list,
                  late_policy: Optional[LatePolicy] = None) -> CourseGradeResult:
        """
        Calculate the course grade.

        Args:
            categories: List of Category
            grade_entries: List of GradeEntry, matched to categories by name
            late_policy: Optional LatePolicy applied to entries marked late

        Returns:
            CourseGradeResult with the rounded percentage and the
            per-category breakdown
        """
        entries_by_category = self._group_graded_entries(grade_entries)

        category_results = []
        weighted_total = 0.0
        weight_seen = 0.0
        seen_names = set()

        for category in categories:
            weight = to_number(category.weight, label="category weight")
            if weight <= 0:
                logger.debug("Skipping zero-weight category %r", category.name)
                continue
            if category.name in seen_names:
                logger.warning("Duplicate category %r ignored", category.name)
                continue
            seen_names.add(category.name)

            items = [
                self._to_scored_item(entry, late_policy)
                for entry in entries_by_category.get(category.name, [])
            ]
            result = self.aggregator.aggregate(
                category.name, weight, items, category.drop_lowest
            )
            category_results.append(result)

            # Not yet assessed: keep it out of the denominator too
            if not result.is_assessed:
                continue

            weighted_total += result.fraction * weight
            weight_seen += weight

        if weight_seen > 0:
            percentage = round2(weighted_total / weight_seen * 100)
        else:
            percentage = 0.0

        return CourseGradeResult(
            percentage=percentage,
            weight_seen=weight_seen,
            categories=category_results,
        )

    def compute(self, categories: list, grade_entries: list,
                late_policy: Optional[LatePolicy] = None) -> float:
        """Shortcut returning only the percentage."""
        return self.calculate(categories, grade_entries, late_policy).percentage

    @staticmethod
    def recorded_score(entry: GradeEntry):
        """
        The score an entry counts with, or None while it is ungraded.

        Participation items are often tracked by status alone: without a
        recorded score, GRADED earns full marks and MISSED earns zero.
        """
        if not is_blank(entry.score):
            return entry.score
        if entry.is_participation:
            if entry.status == GradeStatus.GRADED:
                return to_number(entry.max_score, default=DEFAULT_MAX_SCORE, label="max_score")
            if entry.status == GradeStatus.MISSED:
                return 0.0
        return None

    def _group_graded_entries(self, grade_entries: list) -> dict:
        """Group graded entries by category name, preserving input order."""
        grouped = {}
        for entry in grade_entries:
            if self.recorded_score(entry) is None:
                continue
            grouped.setdefault(entry.category_name, []).append(entry)
        return grouped

    def _to_scored_item(self, entry: GradeEntry, late_policy: Optional[LatePolicy]) -> ScoredItem:
        score = to_number(self.recorded_score(entry), label="score")
        max_score = to_number(entry.max_score, default=DEFAULT_MAX_SCORE, label="max_score")

        if late_policy is not None and entry.status == GradeStatus.LATE:
            score = apply_late_penalty(score, max_score, late_policy)

        return ScoredItem(
            score=score,
            max_score=max_score,
            weight=to_weight(entry.weight),
            label=entry.assignment_name,
        )


def compute_course_grade(categories: list, grade_entries: list,
                         late_policy: Optional[LatePolicy] = None) -> float:
    """Overall course percentage (0-100, 2 decimals) for model inputs."""
    return CourseGradeCalculator().compute(categories, grade_entries, late_policy)
