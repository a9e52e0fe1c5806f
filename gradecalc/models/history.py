"""
Grade history data models.

Contains the PastGrade and Enrollment dataclasses consumed by the GPA
calculator.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import DEFAULT_CREDITS, DEFAULT_GPA_SCALE


@dataclass
class PastGrade:
    """
    A completed course on the student's record.

    At least one of ``letter_grade`` / ``numeric_grade`` should be present.
    When both are, the letter grade wins.

    Attributes:
        course_name: Human-readable course name
        semester: Term label (e.g., "Fall 2024"), used for per-semester GPA
        letter_grade: Letter such as "A-" or "B+"
        numeric_grade: 0-100 percentage, or a value already on the GPA scale
        credits: Credit hours
        gpa_scale: Maximum grade points of the scale (4.0, 5.0, ...)
    """
    course_name: str = ""
    semester: str = ""
    letter_grade: Optional[str] = None
    numeric_grade: Optional[float] = None
    credits: float = DEFAULT_CREDITS
    gpa_scale: float = DEFAULT_GPA_SCALE


@dataclass
class Enrollment:
    """
    A course the student is (or was) enrolled in through the tracker.

    Only enrollments carrying a ``final_grade`` and credits count toward GPA.
    ``archived`` marks a finished course; GPA reports built from a stored
    history skip enrollments that are still active.
    """
    course_title: str = ""
    semester: str = ""
    grades: list = field(default_factory=list)  # List of GradeEntry
    final_grade: Optional[float] = None
    credits: Optional[float] = None
    gpa_scale: float = DEFAULT_GPA_SCALE
    archived: bool = False
