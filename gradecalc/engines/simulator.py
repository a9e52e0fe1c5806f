"""
Hypothetical ("what-if") Grade Simulator.

This module projects a course grade with substituted scores, e.g.
"what if I get 95 on the final?".
"""

from dataclasses import replace
from typing import Optional

from ..config import DEFAULT_MAX_SCORE
from ..log import get_logger
from ..models import CourseGradeResult, GradeEntry, GradeStatus, LatePolicy
from .course_grade import CourseGradeCalculator
from .normalize import to_number, to_optional_number, to_weight

logger = get_logger("engines.simulator")


class HypotheticalGradeSimulator:
    """
    Re-runs the course grade calculation with hypothetical scores.

    The simulator only builds a substituted list of grade entries; the
    percentage itself always comes from CourseGradeCalculator. The
    "current" and "hypothetical" grades shown side by side therefore use
    exactly the same aggregation (drop-lowest, weighting, normalization).

    SUBSTITUTION RULES:
    -------------------
    ``hypothetical_scores`` maps (category_name, assignment_name) to a score.

    - A recorded entry with a hypothetical score gets that score (and is
      treated as graded on time).
    - An assignment from the syllabus with no recorded entry gets a new
      entry using the assignment's max score and weight.
    - Blank or non-numeric hypothetical values are ignored.
    """

    def __init__(self, calculator: Optional[CourseGradeCalculator] = None):
        self.calculator = calculator or CourseGradeCalculator()

    def simulate(self, categories: list, grade_entries: list, hypothetical_scores: dict,
                 late_policy: Optional[LatePolicy] = None) -> CourseGradeResult:
        """
        Project the course grade.

        Args:
            categories: List of Category (with assignment definitions)
            grade_entries: List of recorded GradeEntry
            hypothetical_scores: {(category_name, assignment_name): score}
            late_policy: Optional LatePolicy for entries that stay late

        Returns:
            CourseGradeResult for the substituted entries
        """
        entries = self.substitute(categories, grade_entries, hypothetical_scores)
        return self.calculator.calculate(categories, entries, late_policy)

    def substitute(self, categories: list, grade_entries: list, hypothetical_scores: dict) -> list:
        """Return a new entry list with hypothetical scores applied."""
        scores = {}
        for key, value in (hypothetical_scores or {}).items():
            score = to_optional_number(value, label="hypothetical score")
            if score is not None:
                scores[key] = score

        entries = []
        recorded_keys = set()
        for entry in grade_entries:
            key = (entry.category_name, entry.assignment_name)
            recorded_keys.add(key)
            if key in scores:
                entry = replace(entry, score=scores[key], status=GradeStatus.GRADED)
            entries.append(entry)

        used_keys = set(recorded_keys)
        for category in categories:
            for assignment in category.assignments:
                key = (category.name, assignment.name)
                if key not in scores or key in recorded_keys:
                    continue
                used_keys.add(key)
                entries.append(GradeEntry(
                    category_name=category.name,
                    assignment_name=assignment.name,
                    score=scores[key],
                    max_score=to_number(assignment.max_score, default=DEFAULT_MAX_SCORE, label="max_score"),
                    weight=to_weight(assignment.weight),
                    status=GradeStatus.GRADED,
                    is_participation=assignment.is_participation,
                ))

        for key in scores.keys() - used_keys:
            logger.debug("Hypothetical score for unknown assignment %r ignored", key)

        return entries

    def project(self, categories: list, grade_entries: list, hypothetical_scores: dict,
                late_policy: Optional[LatePolicy] = None) -> float:
        """Shortcut returning only the projected percentage."""
        return self.simulate(categories, grade_entries, hypothetical_scores, late_policy).percentage


def simulate_course_grade(categories: list, grade_entries: list, hypothetical_scores: dict,
                          late_policy: Optional[LatePolicy] = None) -> float:
    """Projected course percentage (0-100, 2 decimals) for model inputs."""
    return HypotheticalGradeSimulator().project(
        categories, grade_entries, hypothetical_scores, late_policy
    )
