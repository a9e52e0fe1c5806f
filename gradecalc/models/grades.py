"""
Recorded grade data models.

Contains the GradeEntry dataclass (a student's recorded submission) and the
ScoredItem triple that the category aggregator works on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import DEFAULT_MAX_SCORE


class GradeStatus(Enum):
    """
    Submission state of a recorded grade.

    Informational only, except LATE which triggers the course late policy.
    Entries without a score are excluded from aggregation, unless they are
    participation items marked GRADED (full marks) or MISSED (zero).
    """
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    LATE = "late"
    GRADED = "graded"
    MISSED = "missed"


@dataclass
class GradeEntry:
    """
    A student's recorded grade for one assignment.

    Linked to its category by name. ``score`` is None while the work is
    ungraded; ``weight`` is None when the entry should take an equal share
    of its category.
    """
    category_name: str
    assignment_name: str = ""
    score: Optional[float] = None
    max_score: float = DEFAULT_MAX_SCORE
    weight: Optional[float] = None
    status: GradeStatus = GradeStatus.NOT_STARTED
    assignment_id: str = ""
    is_participation: bool = False

    @property
    def is_graded(self) -> bool:
        return self.score is not None


@dataclass
class ScoredItem:
    """Points earned, points possible and relative weight of one graded item."""
    score: float
    max_score: float = DEFAULT_MAX_SCORE
    weight: Optional[float] = None
    label: str = ""
