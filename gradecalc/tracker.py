"""
Grade Tracker - Main Orchestrator.

This module contains the GradeTracker class that connects the data and
engine layers to the presentation layer.
"""

from typing import Optional

from .data import DataLoader, RecordParser
from .engines import CourseGradeCalculator, GPACalculator, HypotheticalGradeSimulator
from .log import get_logger
from .models import CourseGradeResult, GPAResult
from .ui import TerminalDisplay

logger = get_logger("tracker")


class GradeTracker:
    """
    Main interface for the grade tracking system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads grade documents through DataLoader / RecordParser
    2. Calls the engines to get results (pure data)
    3. Passes that data to the display layer

    Every report method also returns its result objects, so the tracker
    can back an API as well as the terminal.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        tracker = GradeTracker()

        result = tracker.run_course_report("example_course.json")
        gpa = tracker.run_gpa_report("example_grade_history.json")
    """

    def __init__(self, loader: Optional[DataLoader] = None, display=None):
        self.loader = loader or DataLoader()
        self.parser = RecordParser()
        self.course_calculator = CourseGradeCalculator()
        self.simulator = HypotheticalGradeSimulator(self.course_calculator)
        self.gpa_calculator = GPACalculator()
        self.display = display or TerminalDisplay()

    def load_course(self, document_name: str) -> dict:
        """Load and parse a course document ({"course", "enrollment"})."""
        return self.parser.parse_course_document(self.loader.load_document(document_name))

    def load_history(self, document_name: str) -> dict:
        """Load and parse a history document ({"past_grades", "enrollments"})."""
        return self.parser.parse_history_document(self.loader.load_document(document_name))

    def run_course_report(self, document_name: str) -> CourseGradeResult:
        """Compute and display the current grade of one course."""
        state = self.load_course(document_name)
        course = state["course"]

        result = self.course_calculator.calculate(
            course.categories, state["enrollment"].grades, course.late_policy
        )
        logger.info("Course %r: %.2f%%", course.title, result.percentage)

        self.display.print_course_info(course)
        self.display.print_course_grade(result)
        return result

    def run_what_if(self, document_name: str, hypothetical_scores: dict) -> dict:
        """
        Compare the current grade of a course with a hypothetical one.

        Returns:
            {"current": CourseGradeResult, "projected": CourseGradeResult}
        """
        state = self.load_course(document_name)
        course = state["course"]
        grades = state["enrollment"].grades

        current = self.course_calculator.calculate(course.categories, grades, course.late_policy)
        projected = self.simulator.simulate(
            course.categories, grades, hypothetical_scores, course.late_policy
        )

        self.display.print_course_info(course)
        self.display.print_course_grade(current)
        self.display.print_projection(current, projected)
        return {"current": current, "projected": projected}

    def run_gpa_report(self, document_name: str) -> GPAResult:
        """Compute and display cumulative and per-semester GPA."""
        history = self.load_history(document_name)

        # Active enrollments can carry a provisional final grade; only archived ones count
        finished = [enrollment for enrollment in history["enrollments"] if enrollment.archived]
        result = self.gpa_calculator.calculate(history["past_grades"], finished)
        logger.info("GPA %.2f over %g credits", result.gpa, result.total_credits)

        self.display.print_gpa_report(result)
        return result

    def list_assignments(self, document_name: str) -> list:
        """(category_name, assignment_name) pairs of a course, in syllabus order."""
        course = self.load_course(document_name)["course"]
        return [
            (category.name, assignment.name)
            for category in course.categories
            for assignment in category.assignments
        ]
