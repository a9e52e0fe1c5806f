"""
Configuration constants for the grade calculation engine.

This module contains all configuration values and constants used throughout
the grade and GPA calculations. Centralizing these makes it easy to adjust
behavior as grading policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("GRADECALC_DATA_DIR", BASE_DIR / "data"))

# Example documents used by the interactive CLI
EXAMPLE_COURSE_FILE = "example_course.json"
EXAMPLE_HISTORY_FILE = "example_grade_history.json"


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("GRADECALC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# GRADE ENTRY DEFAULTS
# =============================================================================

# Points possible when an entry or assignment does not say otherwise
DEFAULT_MAX_SCORE = 100.0

# Results are always reported with two decimal places
ROUNDING_PLACES = 2


# =============================================================================
# GPA DEFINITIONS
# =============================================================================

# Credit hours assumed for a past course that does not record any
DEFAULT_CREDITS = 3.0

# Most US institutions grade on 4.0; some weighted programs use 5.0
DEFAULT_GPA_SCALE = 4.0

# Numeric grades at or below this value are read as 0-100 percentages
PERCENT_SCALE_MAX = 100.0

# Letter grade -> grade points on a 4.0 scale.
# Unrecognized letters count as 0.0 (worst case) instead of raising.
LETTER_GRADE_POINTS = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
}
