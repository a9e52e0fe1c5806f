"""
Calculation result data models.

Contains the dataclasses returned by the engines. They carry the final
numbers plus enough breakdown for a display layer to explain them.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CategoryResult:
    """
    Result of aggregating one category.

    Example for Homework with drop_lowest=1:
        name: "Homework"
        weight: 40
        fraction: 0.75          (avg of 50 and 100, the 0 was dropped)
        kept_items: [50/100, 100/100]
        dropped_items: [0/100]

    ``fraction`` is None when the category has no graded items yet
    ("not yet assessed"); such a category does not count toward the
    course percentage at all.
    """
    name: str
    weight: float
    fraction: Optional[float]
    kept_items: list = field(default_factory=list)     # List of ScoredItem
    dropped_items: list = field(default_factory=list)  # List of ScoredItem

    @property
    def is_assessed(self) -> bool:
        return self.fraction is not None

    @property
    def percentage(self) -> Optional[float]:
        if self.fraction is None:
            return None
        return self.fraction * 100


@dataclass
class CourseGradeResult:
    """
    Overall course grade with its per-category breakdown.

    ``weight_seen`` is the total weight of the categories that had graded
    work. The percentage is normalized over it, so early-semester grades
    reflect graded work only.
    """
    percentage: float
    weight_seen: float
    categories: list = field(default_factory=list)  # List of CategoryResult

    @property
    def assessed_categories(self) -> list:
        return [c for c in self.categories if c.is_assessed]

    @property
    def pending_categories(self) -> list:
        return [c for c in self.categories if not c.is_assessed]


@dataclass
class GPAResult:
    """Credit-weighted GPA with the totals it was computed from."""
    gpa: float
    total_credits: float
    course_count: int
    by_semester: dict = field(default_factory=dict)  # {semester: gpa}
