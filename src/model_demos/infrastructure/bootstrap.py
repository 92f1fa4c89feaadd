"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from model_demos.application.finance_app import FinanceApp
from model_demos.application.health_system import HealthSystemApp
from model_demos.application.student_report import StudentReportHandler
from model_demos.application.warehouse_manager import WarehouseManager
from model_demos.domain.model.health import Patient, Prescription
from model_demos.domain.model.inventory import ElectronicItem, GroceryItem
from model_demos.infrastructure.persistence.in_memory_repository import (
    InMemoryInventoryRepository,
    InMemoryRepository,
)
from model_demos.infrastructure.persistence.text_student_store import (
    TextStudentStore,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"
STUDENTS_FILE = DATA_DIR / "students.txt"
REPORT_FILE = DATA_DIR / "report.txt"

SAMPLE_STUDENT_LINES = (
    "101, Alice Smith, 84",
    "102, Bob Johnson, 73",
    "103, Carol White, 65",
    "104, David Brown, 52",
    "105, Eve Davis, 41",
)


def electronics_repository() -> InMemoryInventoryRepository[ElectronicItem]:
    return InMemoryInventoryRepository(entity_name="Electronic item")


def grocery_repository() -> InMemoryInventoryRepository[GroceryItem]:
    return InMemoryInventoryRepository(entity_name="Grocery item")


def patient_repository() -> InMemoryRepository[Patient]:
    return InMemoryRepository(entity_name="Patient")


def prescription_repository() -> InMemoryRepository[Prescription]:
    return InMemoryRepository(entity_name="Prescription")


def student_store(
    input_path: Path | None = None, output_path: Path | None = None
) -> TextStudentStore:
    return TextStudentStore(input_path or STUDENTS_FILE, output_path or REPORT_FILE)


def seed_sample_students(path: Path) -> bool:
    """Write the sample records to *path* unless it already exists."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(SAMPLE_STUDENT_LINES) + "\n", encoding="utf-8")
    return True


# --- Demo factories ---------------------------------------------------------


def finance_app() -> FinanceApp:
    return FinanceApp()


def health_system_app() -> HealthSystemApp:
    return HealthSystemApp(patient_repository(), prescription_repository())


def warehouse_manager() -> WarehouseManager:
    return WarehouseManager(electronics_repository(), grocery_repository())


def student_report_handler(
    input_path: Path | None = None, output_path: Path | None = None
) -> StudentReportHandler:
    return StudentReportHandler(student_store(input_path, output_path))
