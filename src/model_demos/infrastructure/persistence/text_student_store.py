"""Plain-text implementation of StudentRecordStore.

Input lines look like ``101, Alice Smith, 84``. Blank lines are
skipped and fields beyond the third are ignored.
"""

from __future__ import annotations

from pathlib import Path

from model_demos.domain.exceptions import InvalidFormatError, MissingFieldError
from model_demos.domain.model.student import Student
from model_demos.domain.repository.student_store import StudentRecordStore

REQUIRED_FIELDS = 3


class TextStudentStore(StudentRecordStore):

    def __init__(self, input_path: Path, output_path: Path) -> None:
        self._input_path = input_path
        self._output_path = output_path

    @property
    def input_path(self) -> Path:
        return self._input_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    # --- StudentRecordStore interface -----------------------------------------

    def load_students(self) -> list[Student]:
        students: list[Student] = []
        with self._input_path.open("rb") as handle:
            for line_no, raw_line in enumerate(handle, start=1):
                try:
                    line = raw_line.decode("utf-8")
                except UnicodeDecodeError:
                    raise InvalidFormatError(
                        f"Line {line_no}: not valid UTF-8"
                    ) from None
                if not line.strip():
                    continue
                students.append(self._parse_line(line, line_no))
        return students

    def write_report(self, lines: list[str]) -> None:
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        with self._output_path.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")

    # --- Parsing --------------------------------------------------------------

    @staticmethod
    def _parse_line(line: str, line_no: int) -> Student:
        fields = [field.strip() for field in line.split(",")]
        if len(fields) < REQUIRED_FIELDS:
            raise MissingFieldError(
                f"Line {line_no}: expected id, name and score, "
                f"got {len(fields)} field(s): {line.strip()!r}"
            )
        raw_id, name, raw_score = fields[:REQUIRED_FIELDS]
        if not _is_decimal(raw_id):
            raise InvalidFormatError(
                f"Line {line_no}: invalid student ID {raw_id!r}"
            )
        if not _is_decimal(raw_score):
            raise InvalidFormatError(
                f"Line {line_no}: invalid score {raw_score!r} for {name}"
            )
        return Student(id=int(raw_id), full_name=name, score=int(raw_score))


def _is_decimal(raw: str) -> bool:
    """ASCII digits with an optional sign; no underscores, no other scripts."""
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    return digits.isascii() and digits.isdigit()
