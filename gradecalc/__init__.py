"""
Course Grade & GPA Calculation Engine
=====================================

Weighted course grades, what-if projections and GPA for a course-tracking
application.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ENGINE LAYER                                    │
│        (Pure logic - returns dataclasses, NO I/O or printing)           │
│                                                                         │
│  ┌────────────────────┐  ┌───────────────────────┐  ┌───────────────┐   │
│  │ CategoryAggregator │→ │ CourseGradeCalculator │  │ GPACalculator │   │
│  │ (drop-lowest, avg) │  │ (weights, normalize)  │  │ (credits)     │   │
│  └────────────────────┘  └───────────────────────┘  └───────────────┘   │
│                                     ↑                                   │
│                      ┌──────────────────────────────┐                   │
│                      │  HypotheticalGradeSimulator  │                   │
│                      │  (what-if, same aggregation) │                   │
│                      └──────────────────────────────┘                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│  DataLoader / RecordParser  →  GradeTracker  →  TerminalDisplay         │
│  (JSON documents)              (orchestrator)   (the only printing)     │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gradecalc/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── log.py               # Logging setup
├── tracker.py           # GradeTracker orchestrator
├── cli.py               # Command-line interface
├── models/              # Data classes and enums
├── engines/             # Aggregation, course grade, GPA, simulator
├── data/                # DataLoader, RecordParser
└── ui/                  # TerminalDisplay

USAGE
-----

The module-level functions accept model objects or plain JSON-shaped dicts
(the camelCase records a hosting service stores):

    from gradecalc import compute_course_grade, compute_gpa

    categories = [
        {"name": "Exams", "weight": 60, "dropLowest": 0},
        {"name": "HW", "weight": 40, "dropLowest": 1},
    ]
    entries = [
        {"categoryName": "Exams", "score": 90, "maxScore": 100},
        {"categoryName": "HW", "score": 50, "maxScore": 100},
        {"categoryName": "HW", "score": 100, "maxScore": 100},
        {"categoryName": "HW", "score": 0, "maxScore": 100},
    ]
    compute_course_grade(categories, entries)        # 84.0

    compute_gpa([{"letterGrade": "A", "credits": 3}])  # 4.0

Running from command line:

    python -m gradecalc

"""

from typing import Optional

# Version
__version__ = "1.0.0"

from .data import DataLoader, RecordParser
from .engines import (
    CategoryAggregator,
    CourseGradeCalculator,
    GPACalculator,
    HypotheticalGradeSimulator,
)
from .models import (
    Assignment,
    Category,
    CategoryResult,
    CourseGradeResult,
    CourseSchema,
    Enrollment,
    GPAResult,
    GradeEntry,
    GradeStatus,
    LatePolicy,
    LatePolicyType,
    PastGrade,
    ScoredItem,
)
from .tracker import GradeTracker
from .ui import TerminalDisplay
from .cli import main

_parser = RecordParser()


def compute_course_grade(categories: list, grade_entries: list, late_policy=None) -> float:
    """
    Overall course percentage, 0-100 rounded to 2 decimals.

    Args:
        categories: Category objects or category dicts
        grade_entries: GradeEntry objects or grade dicts
        late_policy: Optional LatePolicy or late policy dict
    """
    policy = _parser.coerce_late_policy(late_policy) if late_policy is not None else None
    return CourseGradeCalculator().compute(
        _parser.coerce_categories(categories),
        _parser.coerce_grade_entries(grade_entries),
        policy,
    )


def compute_gpa(past_grades: list, current_enrollments: Optional[list] = None) -> float:
    """
    Credit-weighted GPA rounded to 2 decimals.

    Args:
        past_grades: PastGrade objects or past grade dicts
        current_enrollments: Enrollment objects or enrollment dicts
    """
    return GPACalculator().compute(
        _parser.coerce_past_grades(past_grades),
        _parser.coerce_enrollments(current_enrollments),
    )


def simulate_course_grade(categories: list, grade_entries: list, hypothetical_scores: dict,
                          late_policy=None) -> float:
    """
    Projected course percentage with hypothetical scores substituted.

    ``hypothetical_scores`` maps (category_name, assignment_name) to a score.
    """
    policy = _parser.coerce_late_policy(late_policy) if late_policy is not None else None
    return HypotheticalGradeSimulator().project(
        _parser.coerce_categories(categories),
        _parser.coerce_grade_entries(grade_entries),
        hypothetical_scores,
        policy,
    )


__all__ = [
    # Version
    "__version__",
    # Main entry points
    "compute_course_grade",
    "compute_gpa",
    "simulate_course_grade",
    "GradeTracker",
    "main",
    # Engines
    "CategoryAggregator",
    "CourseGradeCalculator",
    "GPACalculator",
    "HypotheticalGradeSimulator",
    # Models
    "Assignment",
    "Category",
    "CategoryResult",
    "CourseGradeResult",
    "CourseSchema",
    "Enrollment",
    "GPAResult",
    "GradeEntry",
    "GradeStatus",
    "LatePolicy",
    "LatePolicyType",
    "PastGrade",
    "ScoredItem",
    # Data
    "DataLoader",
    "RecordParser",
    # UI
    "TerminalDisplay",
]
