import pytest

from gradecalc.engines import CourseGradeCalculator, HypotheticalGradeSimulator
from gradecalc.models import Assignment, Category, GradeStatus, LatePolicy, LatePolicyType
from conftest import graded


@pytest.fixture
def simulator():
    return HypotheticalGradeSimulator()


def test_no_hypotheticals_matches_current_grade(simulator, exams_hw_categories, exams_hw_entries):
    current = CourseGradeCalculator().compute(exams_hw_categories, exams_hw_entries)

    assert simulator.project(exams_hw_categories, exams_hw_entries, {}) == current


def test_unrecorded_assignment_gets_hypothetical_entry(
        simulator, exams_hw_categories, exams_hw_entries):
    scores = {("Exams", "Final"): 70}

    # Exams: (90 + 70) / 200 = 0.8; HW still 0.75 -> 48 + 30
    assert simulator.project(exams_hw_categories, exams_hw_entries, scores) == pytest.approx(78.00)


def test_recorded_score_is_replaced(simulator, exams_hw_categories, exams_hw_entries):
    scores = {("HW", "HW 3"): 100}

    # HW: 50, 100, 100 drop 50 -> 100%; overall 54 + 40
    assert simulator.project(exams_hw_categories, exams_hw_entries, scores) == pytest.approx(94.00)


def test_inputs_are_not_mutated(simulator, exams_hw_categories, exams_hw_entries):
    simulator.project(exams_hw_categories, exams_hw_entries, {("HW", "HW 3"): 100})

    assert exams_hw_entries[3].score == 0


def test_blank_and_invalid_values_are_ignored(simulator, exams_hw_categories, exams_hw_entries):
    scores = {("Exams", "Final"): "", ("HW", "HW 3"): "abc", ("Nope", "Missing"): 50}

    assert simulator.project(exams_hw_categories, exams_hw_entries, scores) == pytest.approx(84.00)


def test_hypothetical_uses_assignment_max_score(simulator):
    categories = [Category("Labs", 100, assignments=[Assignment("Lab 1", max_score=10)])]

    entries = simulator.substitute(categories, [], {("Labs", "Lab 1"): 8})

    assert entries[0].max_score == 10
    assert simulator.project(categories, [], {("Labs", "Lab 1"): 8}) == pytest.approx(80.00)


def test_hypothetical_pending_category_joins_normalization(simulator):
    categories = [
        Category("Exams", 50, assignments=[Assignment("Final")]),
        Category("HW", 50),
    ]
    entries = [graded("HW", 100)]

    current = simulator.simulate(categories, entries, {})
    projected = simulator.simulate(categories, entries, {("Exams", "Final"): 60})

    assert current.percentage == pytest.approx(100.00)
    assert projected.percentage == pytest.approx(80.00)
    assert projected.weight_seen == 100


def test_substituted_late_entry_is_not_penalized(simulator):
    categories = [Category("HW", 100, assignments=[Assignment("HW 1")])]
    entries = [graded("HW", 60, name="HW 1", status=GradeStatus.LATE)]
    policy = LatePolicy(LatePolicyType.FIXED, value=10)

    assert simulator.project(categories, entries, {}, policy) == pytest.approx(50.00)
    assert simulator.project(categories, entries, {("HW", "HW 1"): 90}, policy) == pytest.approx(90.00)
