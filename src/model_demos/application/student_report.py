"""Application service: student grade report demo."""

from __future__ import annotations

import logging

from model_demos.domain.exceptions import RecordFormatError
from model_demos.domain.model.student import Student
from model_demos.domain.repository.student_store import StudentRecordStore

logger = logging.getLogger(__name__)


class StudentReportHandler:

    def __init__(self, store: StudentRecordStore) -> None:
        self._store = store

    def handle(self) -> list[Student]:
        """Read every student and write the grade report.

        The report is only written once the whole input has been read,
        so a malformed record leaves any existing report untouched.
        """
        students = self._store.load_students()
        self._store.write_report([s.report_line() for s in students])
        logger.info("Wrote grade report for %d student(s)", len(students))
        return students

    def run(self) -> list[str]:
        lines = ["--- StudentReport Start ---"]
        try:
            students = self.handle()
        except RecordFormatError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            lines.append(f"Error: {exc}")
        except OSError as exc:
            logger.error("Could not access student records: %s", exc)
            lines.append(f"Error: {exc}")
        else:
            lines.extend(s.report_line() for s in students)
            lines.append(f"Report written for {len(students)} student(s)")
        lines.append("--- StudentReport End ---")
        return lines
