"""Health records.

A prescription refers to its patient by id only; grouping by patient is
done by the health system, not by the records themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"[{self.id}] {self.name}, {self.age}, {self.gender}"


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"[{self.id}] {self.medication_name} "
            f"(issued {self.date_issued.isoformat()})"
        )
