import pytest

from gradecalc.engines import GPACalculator, compute_gpa
from gradecalc.models import Enrollment, PastGrade


@pytest.fixture
def calculator():
    return GPACalculator()


def test_single_a_is_four(calculator):
    assert calculator.compute([PastGrade(letter_grade="A", credits=3)]) == pytest.approx(4.00)


def test_letter_and_numeric_mix():
    grades = [
        PastGrade(letter_grade="A", credits=3),
        PastGrade(numeric_grade=70, credits=3, gpa_scale=4.0),
    ]

    # (4.0*3 + 2.8*3) / 6
    assert compute_gpa(grades) == pytest.approx(3.40)


@pytest.mark.parametrize("letter, points", [
    ("A+", 4.0), ("A-", 3.7), ("B+", 3.3), ("B-", 2.7), ("C", 2.0),
    ("D-", 0.7), ("F", 0.0), ("b+", 3.3), (" a ", 4.0),
])
def test_letter_table(calculator, letter, points):
    assert calculator.letter_to_points(letter) == pytest.approx(points)


def test_unknown_letter_counts_as_zero(calculator):
    assert calculator.letter_to_points("Z") == 0.0
    assert calculator.compute([PastGrade(letter_grade="Z", credits=3)]) == 0.0


def test_letter_wins_over_numeric(calculator):
    grade = PastGrade(letter_grade="C", numeric_grade=95, credits=3)

    assert calculator.compute([grade]) == pytest.approx(2.00)


def test_numeric_on_other_scale(calculator):
    assert calculator.numeric_to_points(80, 5.0) == pytest.approx(4.0)
    # values above 100 are read as already scaled and divided by the scale
    assert calculator.numeric_to_points(150, 4.0) == pytest.approx(37.5)


def test_credit_weighting(calculator):
    grades = [
        PastGrade(letter_grade="A", credits=4),
        PastGrade(letter_grade="C", credits=1),
    ]

    assert calculator.compute(grades) == pytest.approx((16 + 2) / 5, abs=0.005)


def test_no_credits_gives_zero(calculator):
    assert calculator.compute([]) == 0.0
    assert calculator.compute([PastGrade(letter_grade="A", credits=0)]) == 0.0


def test_record_without_grade_counts_its_credits(calculator):
    grades = [PastGrade(letter_grade="A", credits=3), PastGrade(credits=3)]

    assert calculator.compute(grades) == pytest.approx(2.00)


def test_enrollments_with_final_grade_count(calculator):
    grades = [PastGrade(letter_grade="B", credits=3)]
    enrollments = [
        Enrollment(course_title="Physics", final_grade=90, credits=3),
        Enrollment(course_title="Art", final_grade=None, credits=3),
        Enrollment(course_title="Seminar", final_grade=100, credits=None),
    ]

    result = calculator.calculate(grades, enrollments)

    # (3.0*3 + 3.6*3) / 6
    assert result.gpa == pytest.approx(3.30)
    assert result.course_count == 2
    assert result.total_credits == 6


def test_per_semester_breakdown(calculator):
    grades = [
        PastGrade(semester="Fall 2024", letter_grade="A", credits=3),
        PastGrade(semester="Fall 2024", letter_grade="B", credits=3),
        PastGrade(semester="Spring 2025", letter_grade="C", credits=4),
    ]

    by_semester = calculator.by_semester(grades)

    assert list(by_semester) == ["Fall 2024", "Spring 2025"]
    assert by_semester["Fall 2024"] == pytest.approx(3.50)
    assert by_semester["Spring 2025"] == pytest.approx(2.00)


def test_malformed_numeric_grade_does_not_raise(calculator):
    grades = [PastGrade(numeric_grade="n/a", credits=3), PastGrade(letter_grade="A", credits=3)]

    assert calculator.compute(grades) == pytest.approx(2.00)


def test_unrepresentable_credits_fall_back_to_default(calculator):
    grades = [PastGrade(letter_grade="A", credits=10**400), PastGrade(letter_grade="C", credits=3)]

    result = calculator.calculate(grades)

    assert result.total_credits == 6
    assert result.gpa == pytest.approx(3.00)
