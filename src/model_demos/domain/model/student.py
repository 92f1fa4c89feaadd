"""Student record and the score-to-grade table."""

from __future__ import annotations

from dataclasses import dataclass

# Inclusive (low, high) score ranges. A score that falls in none of them,
# including anything above 100 or below zero, is an F.
GRADE_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"


def grade_for_score(score: int) -> str:
    for low, high, grade in GRADE_BUCKETS:
        if low <= score <= high:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for_score(self.score)

    def report_line(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )
