"""
Data models for the grade calculation engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Assignment, Category, CourseSchema, LatePolicy, LatePolicyType
from .grades import GradeEntry, GradeStatus, ScoredItem
from .history import Enrollment, PastGrade
from .results import CategoryResult, CourseGradeResult, GPAResult

__all__ = [
    # Course schema
    "Assignment",
    "Category",
    "CourseSchema",
    "LatePolicy",
    "LatePolicyType",
    # Recorded grades
    "GradeEntry",
    "GradeStatus",
    "ScoredItem",
    # Grade history
    "Enrollment",
    "PastGrade",
    # Results
    "CategoryResult",
    "CourseGradeResult",
    "GPAResult",
]
