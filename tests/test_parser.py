import logging
from datetime import datetime, timezone

import pytest

from gradecalc.data import RecordParser
from gradecalc.models import Category, GradeStatus, LatePolicyType


@pytest.fixture
def parser():
    return RecordParser()


def test_grade_entry_defaults(parser):
    entry = parser.parse_grade_entry({"categoryName": "HW", "assignmentName": "HW 1"})

    assert entry.score is None
    assert entry.max_score == 100
    assert entry.weight is None
    assert entry.status == GradeStatus.NOT_STARTED
    assert not entry.is_graded


def test_grade_entry_camel_and_snake_case(parser):
    camel = parser.parse_grade_entry({"categoryName": "HW", "score": "17.5", "maxScore": 20,
                                      "status": "LATE"})
    snake = parser.parse_grade_entry({"category_name": "HW", "score": 17.5, "max_score": 20,
                                      "status": "late"})

    assert camel == snake
    assert camel.score == 17.5
    assert camel.status == GradeStatus.LATE


def test_zero_weight_means_equal_share(parser):
    assert parser.parse_grade_entry({"categoryName": "HW", "weight": 0}).weight is None
    assert parser.parse_grade_entry({"categoryName": "HW", "weight": 2}).weight == 2


def test_unknown_status_is_logged(parser, caplog):
    with caplog.at_level(logging.WARNING, logger="gradecalc"):
        entry = parser.parse_grade_entry({"categoryName": "HW", "status": "excused"})

    assert entry.status == GradeStatus.NOT_STARTED
    assert "excused" in caplog.text


def test_category_with_assignments(parser):
    category = parser.parse_category({
        "name": "Exams",
        "weight": "60",
        "dropLowest": 1,
        "assignments": [
            {"name": "Midterm", "dueDate": "2025-10-15T09:00:00Z"},
            {"name": "Final", "maxScore": 150, "dueDate": "not a date"},
        ],
    })

    assert category.weight == 60
    assert category.drop_lowest == 1
    assert category.assignments[0].max_score == 100
    assert category.assignments[0].due_date == datetime(2025, 10, 15, 9, tzinfo=timezone.utc)
    assert category.assignments[1].max_score == 150
    assert category.assignments[1].due_date is None
    assert category.find_assignment("Final") is category.assignments[1]
    assert category.find_assignment("Quiz") is None


def test_late_policy(parser):
    policy = parser.parse_late_policy({"type": "percentage", "value": 10, "maxDeduction": 50})

    assert policy.type == LatePolicyType.PERCENTAGE
    assert policy.value == 10
    assert policy.max_deduction == 50
    assert parser.parse_late_policy(None).type == LatePolicyType.NONE
    assert parser.parse_late_policy({"type": "exponential"}).type == LatePolicyType.NONE


def test_past_grade_defaults(parser):
    past = parser.parse_past_grade({"courseName": "Chemistry", "semester": "Fall 2025",
                                    "letterGrade": "A-"})

    assert past.credits == 3
    assert past.gpa_scale == 4.0
    assert past.letter_grade == "A-"
    assert past.numeric_grade is None


def test_blank_letter_grade_becomes_none(parser):
    past = parser.parse_past_grade({"letterGrade": "  ", "numericGrade": 88})

    assert past.letter_grade is None
    assert past.numeric_grade == 88


def test_coerce_keeps_model_instances(parser):
    existing = Category("Exams", 50)

    categories = parser.coerce_categories([existing, {"name": "HW", "weight": 50}])

    assert categories[0] is existing
    assert categories[1] == Category("HW", 50)


def test_course_document(parser, course_document):
    state = parser.parse_course_document(course_document)

    course = state["course"]
    assert course.title == "Intro Biology"
    assert course.total_weight == 100
    assert course.late_policy.type == LatePolicyType.FIXED
    assert [g.assignment_name for g in state["enrollment"].grades] == ["Exam 1", "Lab 1", "Lab 2"]


def test_history_document(parser, history_document):
    history = parser.parse_history_document(history_document)

    assert len(history["past_grades"]) == 2
    assert history["enrollments"][0].final_grade is None
    assert history["enrollments"][0].credits == 4
