"""
GPA Calculator.

This module computes credit-weighted grade-point averages from completed
courses and finalized enrollments.
"""

from typing import Optional

from ..config import (
    DEFAULT_CREDITS,
    DEFAULT_GPA_SCALE,
    LETTER_GRADE_POINTS,
    PERCENT_SCALE_MAX,
)
from ..log import get_logger
from ..models import Enrollment, GPAResult, PastGrade
from .normalize import is_blank, round2, to_number, to_optional_number

logger = get_logger("engines.gpa")


class GPACalculator:
    """
    Computes a credit-weighted GPA.

    GRADE POINTS:
    -------------
    Letter grades use a fixed lookup table (A+/A = 4.0 ... F = 0.0).
    Unrecognized letters count as 0.0 rather than raising.

    Numeric grades:
    - n <= 100  ->  a 0-100 percentage:   points = (n / 100) · gpa_scale
    - n >  100  ->  already scaled:       points = n / gpa_scale

    A record with both a letter and a numeric grade uses the letter.

    WEIGHTING:
    ----------
        GPA = Σ(points_i · credits_i) / Σ(credits_i)

    Past grades without credits count as DEFAULT_CREDITS (3). Enrollments
    count only once they carry a final grade and credits.
    """

    def __init__(self, letter_points: Optional[dict] = None):
        self.letter_points = letter_points or LETTER_GRADE_POINTS

    def letter_to_points(self, letter: str) -> float:
        """Grade points for a letter grade (case and whitespace insensitive)."""
        key = str(letter).strip().upper()
        if key not in self.letter_points:
            logger.warning("Unknown letter grade %r counted as 0.0", letter)
            return 0.0
        return self.letter_points[key]

    @staticmethod
    def numeric_to_points(grade: float, gpa_scale: float) -> float:
        """Grade points for a numeric grade on the given scale."""
        if grade <= PERCENT_SCALE_MAX:
            return (grade / PERCENT_SCALE_MAX) * gpa_scale
        return grade / gpa_scale

    def past_grade_points(self, past_grade: PastGrade) -> float:
        """Grade points earned by one completed course."""
        if not is_blank(past_grade.letter_grade):
            return self.letter_to_points(past_grade.letter_grade)

        numeric = to_optional_number(past_grade.numeric_grade, label="numeric grade")
        if numeric is None:
            logger.debug("Past grade %r has no grade, counted as 0.0", past_grade.course_name)
            return 0.0
        return self.numeric_to_points(numeric, self._scale(past_grade.gpa_scale))

    def calculate(self, past_grades: list, current_enrollments: Optional[list] = None) -> GPAResult:
        """
        Calculate cumulative GPA plus a per-semester breakdown.

        Args:
            past_grades: List of PastGrade
            current_enrollments: Optional list of Enrollment

        Returns:
            GPAResult
        """
        records = self._weighted_records(past_grades, current_enrollments)

        semesters = {}
        for semester, points, credits in records:
            semesters.setdefault(semester, []).append((points, credits))

        return GPAResult(
            gpa=self._average([(points, credits) for _, points, credits in records]),
            total_credits=sum(credits for _, _, credits in records),
            course_count=len(records),
            by_semester={
                semester: self._average(pairs) for semester, pairs in semesters.items()
            },
        )

    def compute(self, past_grades: list, current_enrollments: Optional[list] = None) -> float:
        """Shortcut returning only the cumulative GPA."""
        return self.calculate(past_grades, current_enrollments).gpa

    def by_semester(self, past_grades: list, current_enrollments: Optional[list] = None) -> dict:
        """GPA per semester label, in first-seen order."""
        return self.calculate(past_grades, current_enrollments).by_semester

    def _weighted_records(self, past_grades: list, current_enrollments: Optional[list]) -> list:
        """Flatten inputs into (semester, points, credits) triples."""
        records = []

        for past_grade in past_grades or []:
            # Only a missing value defaults; an explicit 0 is a no-credit course that must not count
            credits = to_number(past_grade.credits, default=DEFAULT_CREDITS, label="credits")
            records.append((past_grade.semester, self.past_grade_points(past_grade), credits))

        for enrollment in current_enrollments or []:
            points = self._enrollment_points(enrollment)
            if points is None:
                continue
            credits = to_number(enrollment.credits, label="credits")
            records.append((enrollment.semester, points, credits))

        return records

    def _enrollment_points(self, enrollment: Enrollment) -> Optional[float]:
        final_grade = to_optional_number(enrollment.final_grade, label="final grade")
        if final_grade is None or not to_number(enrollment.credits, label="credits"):
            return None
        return self.numeric_to_points(final_grade, self._scale(enrollment.gpa_scale))

    @staticmethod
    def _scale(value) -> float:
        # A zero scale would divide by zero for already-scaled grades
        return to_number(value, default=DEFAULT_GPA_SCALE, label="gpa scale") or DEFAULT_GPA_SCALE

    @staticmethod
    def _average(pairs: list) -> float:
        total_credits = sum(credits for _, credits in pairs)
        if total_credits <= 0:
            return 0.0
        return round2(sum(points * credits for points, credits in pairs) / total_credits)


def compute_gpa(past_grades: list, current_enrollments: Optional[list] = None) -> float:
    """Credit-weighted GPA (2 decimals) for model inputs."""
    return GPACalculator().compute(past_grades, current_enrollments)
