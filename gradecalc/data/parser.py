"""
Record parsing.

This module converts JSON-shaped records (as stored by the hosting service)
into the engine's model objects.
"""

from datetime import datetime
from typing import Any, Optional

from ..config import DEFAULT_CREDITS, DEFAULT_GPA_SCALE, DEFAULT_MAX_SCORE
from ..engines.normalize import is_blank, to_number, to_weight
from ..log import get_logger
from ..models import (
    Assignment,
    Category,
    CourseSchema,
    Enrollment,
    GradeEntry,
    GradeStatus,
    LatePolicy,
    LatePolicyType,
    PastGrade,
)

logger = get_logger("data.parser")


def _get(data: dict, *keys: str, default: Any = None) -> Any:
    """First present key wins; records use camelCase, callers may use snake_case."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


class RecordParser:
    """
    Parses raw records into model objects.

    KEY RESPONSIBILITY: apply the documented defaults so the engines only
    ever see well-formed models.

    DEFAULTS:
    - maxScore missing            -> 100
    - weight missing or 0         -> None (equal share)
    - dropLowest missing          -> 0
    - status missing or unknown   -> not_started
    - credits missing             -> 3
    - gpaScale missing            -> 4.0
    - latePolicy missing          -> type "none"

    Every ``coerce_*`` method accepts a mix of model instances and dicts,
    so callers can hand over whatever they already have.
    """

    # ------------------------------------------------------------------
    # Course schema
    # ------------------------------------------------------------------

    def parse_assignment(self, data: dict) -> Assignment:
        return Assignment(
            name=str(_get(data, "name", default="")),
            weight=to_number(_get(data, "weight"), label="assignment weight"),
            max_score=to_number(_get(data, "maxScore", "max_score"), default=DEFAULT_MAX_SCORE,
                                label="max_score"),
            due_date=self._parse_date(_get(data, "dueDate", "due_date")),
            is_participation=bool(_get(data, "isParticipation", "is_participation", default=False)),
        )

    def parse_category(self, data: dict) -> Category:
        return Category(
            name=str(_get(data, "name", default="")),
            weight=to_number(_get(data, "weight"), label="category weight"),
            drop_lowest=int(to_number(_get(data, "dropLowest", "drop_lowest"), label="drop_lowest")),
            assignments=[self.parse_assignment(a) for a in _get(data, "assignments", default=[])],
        )

    def parse_late_policy(self, data: Optional[dict]) -> LatePolicy:
        if not data:
            return LatePolicy()

        raw_type = str(_get(data, "type", default="none")).strip().lower()
        try:
            policy_type = LatePolicyType(raw_type)
        except ValueError:
            logger.warning("Unknown late policy type %r treated as none", raw_type)
            policy_type = LatePolicyType.NONE

        return LatePolicy(
            type=policy_type,
            value=to_number(_get(data, "value"), label="late policy value"),
            max_deduction=to_number(_get(data, "maxDeduction", "max_deduction"), default=100.0,
                                    label="late policy max deduction"),
        )

    def parse_course(self, data: dict) -> CourseSchema:
        return CourseSchema(
            title=str(_get(data, "title", default="")),
            categories=self.coerce_categories(_get(data, "categories", default=[])),
            late_policy=self.coerce_late_policy(_get(data, "latePolicy", "late_policy")),
            course_id=str(_get(data, "courseId", "course_id", default="")),
            instructor=str(_get(data, "instructor", default="")),
            semester=str(_get(data, "semester", default="")),
        )

    # ------------------------------------------------------------------
    # Recorded grades and history
    # ------------------------------------------------------------------

    def parse_grade_entry(self, data: dict) -> GradeEntry:
        score = _get(data, "score")
        return GradeEntry(
            category_name=str(_get(data, "categoryName", "category_name", default="")),
            assignment_name=str(_get(data, "assignmentName", "assignment_name", default="")),
            score=None if is_blank(score) else to_number(score, label="score"),
            max_score=to_number(_get(data, "maxScore", "max_score"), default=DEFAULT_MAX_SCORE,
                                label="max_score"),
            weight=to_weight(_get(data, "weight")),
            status=self._parse_status(_get(data, "status")),
            assignment_id=str(_get(data, "assignmentId", "assignment_id", default="")),
            is_participation=bool(_get(data, "isParticipation", "is_participation", default=False)),
        )

    def parse_past_grade(self, data: dict) -> PastGrade:
        letter = _get(data, "letterGrade", "letter_grade")
        numeric = _get(data, "numericGrade", "numeric_grade")
        return PastGrade(
            course_name=str(_get(data, "courseName", "course_name", default="")),
            semester=str(_get(data, "semester", default="")),
            letter_grade=None if is_blank(letter) else str(letter),
            numeric_grade=None if is_blank(numeric) else to_number(numeric, label="numeric grade"),
            credits=to_number(_get(data, "credits"), default=DEFAULT_CREDITS, label="credits"),
            gpa_scale=to_number(_get(data, "gpaScale", "gpa_scale"), default=DEFAULT_GPA_SCALE,
                                label="gpa scale"),
        )

    def parse_enrollment(self, data: dict) -> Enrollment:
        final_grade = _get(data, "finalGrade", "final_grade")
        credits = _get(data, "credits")
        return Enrollment(
            course_title=str(_get(data, "courseTitle", "course_title", default="")),
            semester=str(_get(data, "semester", default="")),
            grades=self.coerce_grade_entries(_get(data, "grades", default=[])),
            final_grade=None if is_blank(final_grade) else to_number(final_grade, label="final grade"),
            credits=None if is_blank(credits) else to_number(credits, label="credits"),
            gpa_scale=to_number(_get(data, "gpaScale", "gpa_scale"), default=DEFAULT_GPA_SCALE,
                                label="gpa scale"),
            archived=bool(_get(data, "archived", default=False)),
        )

    # ------------------------------------------------------------------
    # Whole documents
    # ------------------------------------------------------------------

    def parse_course_document(self, document: dict) -> dict:
        """
        Parse a course document.

        Returns:
            {
                "course": CourseSchema,
                "enrollment": Enrollment,   # the student's recorded grades
            }
        """
        return {
            "course": self.parse_course(document.get("course", {})),
            "enrollment": self.parse_enrollment(document.get("enrollment", {})),
        }

    def parse_history_document(self, document: dict) -> dict:
        """
        Parse a grade history document.

        Returns:
            {
                "past_grades": [PastGrade, ...],
                "enrollments": [Enrollment, ...],
            }
        """
        return {
            "past_grades": self.coerce_past_grades(_get(document, "pastGrades", "past_grades", default=[])),
            "enrollments": self.coerce_enrollments(_get(document, "enrollments", default=[])),
        }

    # ------------------------------------------------------------------
    # Mixed input coercion
    # ------------------------------------------------------------------

    def coerce_categories(self, items) -> list:
        return [c if isinstance(c, Category) else self.parse_category(c) for c in items or []]

    def coerce_grade_entries(self, items) -> list:
        return [g if isinstance(g, GradeEntry) else self.parse_grade_entry(g) for g in items or []]

    def coerce_past_grades(self, items) -> list:
        return [p if isinstance(p, PastGrade) else self.parse_past_grade(p) for p in items or []]

    def coerce_enrollments(self, items) -> list:
        return [e if isinstance(e, Enrollment) else self.parse_enrollment(e) for e in items or []]

    def coerce_late_policy(self, policy) -> LatePolicy:
        if isinstance(policy, LatePolicy):
            return policy
        return self.parse_late_policy(policy)

    # ------------------------------------------------------------------

    @staticmethod
    def _parse_status(value: Any) -> GradeStatus:
        if is_blank(value):
            return GradeStatus.NOT_STARTED
        if isinstance(value, GradeStatus):
            return value
        try:
            return GradeStatus(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown grade status %r treated as not_started", value)
            return GradeStatus.NOT_STARTED

    @staticmethod
    def _parse_date(value: Any) -> Optional[datetime]:
        if is_blank(value):
            return None
        if isinstance(value, datetime):
            return value
        text = str(value).strip()
        # fromisoformat() rejects the "Z" suffix on older interpreters
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.warning("Unparseable due date %r ignored", value)
            return None
