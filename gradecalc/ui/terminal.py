"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gradecalc package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import CategoryResult, CourseGradeResult, CourseSchema, GPAResult


class TerminalDisplay:
    """
    Pretty terminal output for grade and GPA results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely; the result dataclasses convert to JSON
       with dataclasses.asdict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def grade_color(cls, percentage: float) -> str:
        """Green for 90+, yellow for 70+, red below."""
        if percentage >= 90:
            return cls.GREEN
        elif percentage >= 70:
            return cls.YELLOW
        return cls.RED

    @classmethod
    def print_course_info(cls, course: CourseSchema):
        """Print course identification information."""
        cls.print_header(f"COURSE: {course.title.upper() or 'UNTITLED'}")
        if course.instructor:
            print(f"  {cls.BOLD}Instructor:{cls.RESET} {course.instructor}")
        if course.semester:
            print(f"  {cls.BOLD}Semester:{cls.RESET} {course.semester}")
        print(f"  {cls.BOLD}Late Policy:{cls.RESET} {course.late_policy.type.value}")

        total = course.total_weight
        if total != 100:
            print(f"  {cls.YELLOW}Category weights sum to {total:g}, not 100; "
                  f"grades are normalized{cls.RESET}")

    @classmethod
    def print_course_grade(cls, result: CourseGradeResult, title: str = "Current Grade"):
        """Print the course percentage with its category breakdown."""
        cls.print_subheader(title)

        if not result.assessed_categories:
            print(f"  {cls.DIM}No graded work yet.{cls.RESET}")
        else:
            color = cls.grade_color(result.percentage)
            print(f"  {cls.BOLD}Overall:{cls.RESET} {color}{result.percentage:.2f}%{cls.RESET}"
                  f"  {cls.DIM}(based on {result.weight_seen:g}% of the course){cls.RESET}")

        print(f"\n  {cls.BOLD}{'CATEGORY':<24} {'WEIGHT':>8} {'SCORE':>10} {'KEPT':>6} {'DROPPED':>8}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 60}{cls.RESET}")

        for category in result.categories:
            cls._print_category_row(category)

    @classmethod
    def _print_category_row(cls, category: CategoryResult):
        if category.is_assessed:
            pct = category.percentage
            score_str = f"{cls.grade_color(pct)}{pct:>9.2f}%{cls.RESET}"
        else:
            score_str = f"{cls.DIM}{'pending':>10}{cls.RESET}"

        print(f"  {category.name:<24} {category.weight:>7g}% {score_str} "
              f"{len(category.kept_items):>6} {len(category.dropped_items):>8}")

    @classmethod
    def print_projection(cls, current: CourseGradeResult, projected: CourseGradeResult):
        """Print a hypothetical grade next to the current one."""
        cls.print_course_grade(projected, title="Hypothetical Grade")

        delta = projected.percentage - current.percentage
        if delta > 0:
            delta_str = f"{cls.GREEN}+{delta:.2f}{cls.RESET}"
        elif delta < 0:
            delta_str = f"{cls.RED}{delta:.2f}{cls.RESET}"
        else:
            delta_str = f"{cls.DIM}±0.00{cls.RESET}"

        print(f"\n  {cls.BOLD}Current:{cls.RESET} {current.percentage:.2f}%  "
              f"{cls.BOLD}Projected:{cls.RESET} {projected.percentage:.2f}%  ({delta_str})")

    @classmethod
    def print_gpa_report(cls, result: GPAResult):
        """Print cumulative and per-semester GPA."""
        cls.print_header("PAST GRADES & GPA")

        print(f"  {cls.BOLD}Overall GPA:{cls.RESET} {cls.MAGENTA}{result.gpa:.2f}{cls.RESET}")
        print(f"  {cls.BOLD}Courses:{cls.RESET} {result.course_count} ({result.total_credits:g} credits)")

        if result.by_semester:
            cls.print_subheader("By Semester")
            for semester, gpa in result.by_semester.items():
                print(f"  {semester or '(unspecified)':<24} {gpa:>6.2f}")
