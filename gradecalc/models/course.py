"""
Course schema data models.

Contains the Category, Assignment and LatePolicy dataclasses that describe
how a course is graded (usually extracted from the syllabus).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..config import DEFAULT_MAX_SCORE


class LatePolicyType(Enum):
    """
    How a course penalizes late submissions.

    NONE: Late work is graded like any other work
    PERCENTAGE: Deduct a percentage of the item's max score
    FIXED: Deduct a fixed number of points
    """
    NONE = "none"
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass
class LatePolicy:
    """
    Late submission policy for a course.

    Attributes:
        type: LatePolicyType enum value
        value: Percentage (for PERCENTAGE) or points (for FIXED) to deduct
        max_deduction: Cap on the deduction, as a percentage of the item's
                       max score (100 means the whole item can be lost)
    """
    type: LatePolicyType = LatePolicyType.NONE
    value: float = 0.0
    max_deduction: float = 100.0


@dataclass
class Assignment:
    """
    A single assignment defined by the syllabus.

    A weight of 0 means "equal weight" - the share is resolved at
    computation time from the number of items being averaged.
    """
    name: str
    weight: float = 0.0
    max_score: float = DEFAULT_MAX_SCORE
    due_date: Optional[datetime] = None
    is_participation: bool = False


@dataclass
class Category:
    """
    A weighted grading bucket of a course (e.g., "Exams", "Homework").

    Attributes:
        name: Identifier, unique within a course
        weight: Percentage points (0-100) this category contributes
        drop_lowest: Number of lowest-scoring items excluded from the average
        assignments: Ordered assignment definitions from the syllabus

    Category weights across a course *should* sum to 100 but are not
    required to; the course calculator normalizes over what it has seen.
    """
    name: str
    weight: float
    drop_lowest: int = 0
    assignments: list = field(default_factory=list)  # List of Assignment

    def find_assignment(self, assignment_name: str) -> Optional[Assignment]:
        for assignment in self.assignments:
            if assignment.name == assignment_name:
                return assignment
        return None


@dataclass
class CourseSchema:
    """Grading structure of one course: its categories and late policy."""
    title: str
    categories: list = field(default_factory=list)  # List of Category
    late_policy: LatePolicy = field(default_factory=LatePolicy)
    course_id: str = ""
    instructor: str = ""
    semester: str = ""

    @property
    def total_weight(self) -> float:
        return sum(c.weight for c in self.categories)
