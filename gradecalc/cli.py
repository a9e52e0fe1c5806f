"""
Command-Line Interface for the Grade Tracker.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
1. COURSE GRADE: Current weighted grade of a course
2. GPA REPORT: Cumulative and per-semester GPA from past grades
3. WHAT-IF: Project a course grade with hypothetical scores

Run with:
    python -m gradecalc
"""

from .config import EXAMPLE_COURSE_FILE, EXAMPLE_HISTORY_FILE
from .log import setup_logging
from .tracker import GradeTracker
from .ui import TerminalDisplay


def _ask(prompt: str, default: str) -> str:
    """Read a line of input, falling back to ``default`` when none is available."""
    try:
        answer = input(prompt).strip()
    except EOFError:
        return default
    return answer or default


def _select_document(tracker: GradeTracker, default: str) -> str:
    """Let the user pick a grade document from the data directory."""
    documents = tracker.loader.list_documents()
    if documents:
        print(f"\n  {TerminalDisplay.DIM}Available documents:{TerminalDisplay.RESET}")
        for i, name in enumerate(documents, 1):
            print(f"    {i}. {name}")

    choice = _ask(f"  Document (number or file name) [{default}]: ", default)
    if choice.isdigit():
        index = int(choice)
        if 1 <= index <= len(documents):
            return documents[index - 1]
        print(f"  → Using default: {default}")
        return default
    return choice


def _collect_hypotheticals(tracker: GradeTracker, document: str) -> dict:
    """
    Ask for hypothetical scores assignment by assignment.

    Blank input keeps the recorded score (or leaves the assignment
    ungraded), so the user only types the scores they want to try.
    """
    print(f"\n  {TerminalDisplay.DIM}Enter a hypothetical score, or press Enter to skip.{TerminalDisplay.RESET}")

    scores = {}
    for category_name, assignment_name in tracker.list_assignments(document):
        value = _ask(f"    {category_name} / {assignment_name}: ", "")
        if not value:
            continue
        try:
            scores[(category_name, assignment_name)] = float(value)
        except ValueError:
            print(f"    {TerminalDisplay.YELLOW}Not a number, skipped{TerminalDisplay.RESET}")
    return scores


def main():
    """
    Command-line interface for the grade tracker.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. COURSE GRADE:
       Weighted course grade with drop-lowest and late penalties applied,
       normalized over the categories that have graded work.

    2. GPA REPORT:
       Credit-weighted GPA over past grades and finalized enrollments,
       with a per-semester breakdown.

    3. WHAT-IF:
       The course grade again, with hypothetical scores substituted.

    ═══════════════════════════════════════════════════════════════════════════
    """
    setup_logging()
    tracker = GradeTracker()

    # Welcome banner with mode selection
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         COURSE GRADE TRACKER                                     ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📊 COURSE GRADE - Current weighted grade of a course         ║")
    print("║  2. 🎓 GPA REPORT   - Cumulative and per-semester GPA            ║")
    print("║  3. 🔮 WHAT-IF      - Try hypothetical scores                    ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    mode = _ask(f"{TerminalDisplay.BOLD}Select mode (1, 2 or 3): {TerminalDisplay.RESET}", "1")

    try:
        if mode == "2":
            document = _select_document(tracker, EXAMPLE_HISTORY_FILE)
            tracker.run_gpa_report(document)
        elif mode == "3":
            document = _select_document(tracker, EXAMPLE_COURSE_FILE)
            scores = _collect_hypotheticals(tracker, document)
            tracker.run_what_if(document, scores)
        else:
            document = _select_document(tracker, EXAMPLE_COURSE_FILE)
            tracker.run_course_report(document)
    except FileNotFoundError as e:
        print(f"\n  {TerminalDisplay.RED}Error: {e}{TerminalDisplay.RESET}")
        return 1
    return 0


if __name__ == "__main__":
    main()
