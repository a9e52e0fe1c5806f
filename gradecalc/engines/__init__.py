"""
Grade calculation engines.

This package contains the pure computation layer: no I/O, no printing,
no shared state. Every engine takes model objects and returns results.
"""

from .category import CategoryAggregator
from .course_grade import CourseGradeCalculator, compute_course_grade
from .gpa import GPACalculator, compute_gpa
from .penalty import apply_late_penalty
from .simulator import HypotheticalGradeSimulator, simulate_course_grade

__all__ = [
    "CategoryAggregator",
    "CourseGradeCalculator",
    "GPACalculator",
    "HypotheticalGradeSimulator",
    "apply_late_penalty",
    "compute_course_grade",
    "compute_gpa",
    "simulate_course_grade",
]
