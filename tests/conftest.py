# tests/conftest.py
"""Shared fixtures: a small two-category course and its recorded grades."""

import json

import pytest

from gradecalc.models import Assignment, Category, GradeEntry, GradeStatus, ScoredItem


def graded(category, score, max_score=100, name="", **kwargs):
    return GradeEntry(
        category_name=category,
        assignment_name=name,
        score=score,
        max_score=max_score,
        status=kwargs.pop("status", GradeStatus.GRADED),
        **kwargs,
    )


def item(score, max_score=100, weight=None, label=""):
    return ScoredItem(score=score, max_score=max_score, weight=weight, label=label)


@pytest.fixture
def exams_hw_categories():
    return [
        Category(name="Exams", weight=60, drop_lowest=0, assignments=[
            Assignment(name="Midterm"),
            Assignment(name="Final"),
        ]),
        Category(name="HW", weight=40, drop_lowest=1, assignments=[
            Assignment(name="HW 1"),
            Assignment(name="HW 2"),
            Assignment(name="HW 3"),
        ]),
    ]


@pytest.fixture
def exams_hw_entries():
    return [
        graded("Exams", 90, name="Midterm"),
        graded("HW", 50, name="HW 1"),
        graded("HW", 100, name="HW 2"),
        graded("HW", 0, name="HW 3"),
    ]


@pytest.fixture
def course_document():
    return {
        "course": {
            "courseId": "BIO-110",
            "title": "Intro Biology",
            "semester": "Spring 2026",
            "latePolicy": {"type": "fixed", "value": 5},
            "categories": [
                {"name": "Exams", "weight": 70, "assignments": [
                    {"name": "Exam 1"}, {"name": "Exam 2"},
                ]},
                {"name": "Labs", "weight": 30, "dropLowest": 1, "assignments": [
                    {"name": "Lab 1", "maxScore": 10},
                    {"name": "Lab 2", "maxScore": 10},
                ]},
            ],
        },
        "enrollment": {
            "grades": [
                {"categoryName": "Exams", "assignmentName": "Exam 1", "score": 80, "status": "graded"},
                {"categoryName": "Labs", "assignmentName": "Lab 1", "score": 10, "maxScore": 10,
                 "status": "late"},
                {"categoryName": "Labs", "assignmentName": "Lab 2", "score": 9, "maxScore": 10,
                 "status": "graded"},
            ],
        },
    }


@pytest.fixture
def history_document():
    return {
        "pastGrades": [
            {"courseName": "Chemistry", "semester": "Fall 2025", "letterGrade": "A", "credits": 3},
            {"courseName": "Statistics", "semester": "Spring 2026", "numericGrade": 70, "credits": 3},
        ],
        "enrollments": [
            {"courseTitle": "Physics", "semester": "Spring 2026", "credits": 4},
        ],
    }


@pytest.fixture
def data_dir(tmp_path, course_document, history_document):
    (tmp_path / "course.json").write_text(json.dumps(course_document))
    (tmp_path / "history.json").write_text(json.dumps(history_document))
    return tmp_path
