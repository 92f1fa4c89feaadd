"""Unit tests for the score-to-grade table."""

import pytest

from model_demos.domain.model.student import Student, grade_for_score


class TestGradeForScore:

    @pytest.mark.parametrize(
        "score, grade",
        [
            (100, "A"),
            (80, "A"),
            (79, "B"),
            (70, "B"),
            (69, "C"),
            (60, "C"),
            (59, "D"),
            (50, "D"),
            (49, "F"),
            (0, "F"),
        ],
    )
    def test_bucket_boundaries(self, score, grade):
        assert grade_for_score(score) == grade

    def test_negative_score_is_f(self):
        assert grade_for_score(-5) == "F"

    def test_score_above_hundred_is_f(self):
        assert grade_for_score(101) == "F"


class TestStudent:

    def test_grade_derived_from_score(self):
        assert Student(id=1, full_name="Alice Smith", score=84).grade == "A"

    def test_report_line(self):
        student = Student(id=102, full_name="Bob Johnson", score=73)
        assert student.report_line() == "Bob Johnson (ID: 102): Score = 73, Grade = B"
