"""Abstract source of student records and sink for the grade report."""

from __future__ import annotations

from abc import ABC, abstractmethod

from model_demos.domain.model.student import Student


class StudentRecordStore(ABC):

    @abstractmethod
    def load_students(self) -> list[Student]:
        """Return every student record, in source order.

        Raises MissingFieldError or InvalidFormatError if any record is
        malformed; no partial result is returned.
        """

    @abstractmethod
    def write_report(self, lines: list[str]) -> None:
        """Replace the report with *lines*, one per student."""
