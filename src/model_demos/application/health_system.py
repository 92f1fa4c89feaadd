"""Application service: health records demo."""

from __future__ import annotations

import logging
from datetime import date

from model_demos.domain.exceptions import EntityNotFoundError
from model_demos.domain.model.health import Patient, Prescription
from model_demos.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class HealthSystemApp:
    """Looks up patients and the prescriptions issued to them.

    Prescriptions are grouped by patient id once, by
    ``build_prescription_map()``, and read from that map afterwards.
    """

    def __init__(
        self,
        patient_repo: Repository[Patient],
        prescription_repo: Repository[Prescription],
    ) -> None:
        self._patient_repo = patient_repo
        self._prescription_repo = prescription_repo
        self._prescription_map: dict[int, list[Prescription]] = {}

    def seed_data(self) -> None:
        for patient in (
            Patient(id=1, name="Ama Mensah", age=34, gender="F"),
            Patient(id=2, name="Kofi Boateng", age=52, gender="M"),
            Patient(id=3, name="Esi Owusu", age=27, gender="F"),
        ):
            self._patient_repo.add(patient)

        for prescription in (
            Prescription(1, 1, "Amoxicillin", date(2026, 9, 2)),
            Prescription(2, 1, "Ibuprofen", date(2026, 9, 14)),
            Prescription(3, 2, "Metformin", date(2026, 8, 21)),
            Prescription(4, 3, "Cetirizine", date(2026, 10, 1)),
            Prescription(5, 2, "Lisinopril", date(2026, 10, 5)),
        ):
            self._prescription_repo.add(prescription)

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        grouped: dict[int, list[Prescription]] = {}
        for prescription in self._prescription_repo.list_all():
            grouped.setdefault(prescription.patient_id, []).append(prescription)
        self._prescription_map = grouped
        return {pid: list(items) for pid, items in grouped.items()}

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """Return a patient's prescriptions.

        Raises EntityNotFoundError for an unknown patient. A known patient
        without prescriptions gets an empty list.
        """
        self._patient_repo.get_by_id(patient_id)
        return list(self._prescription_map.get(patient_id, []))

    def list_patients(self) -> list[str]:
        return [str(patient) for patient in self._patient_repo.list_all()]

    def list_prescriptions_for_patient(self, patient_id: int) -> list[str]:
        try:
            patient = self._patient_repo.get_by_id(patient_id)
        except EntityNotFoundError as exc:
            logger.warning("%s", exc)
            return [f"Error: {exc}"]

        prescriptions = self._prescription_map.get(patient_id, [])
        lines = [f"Prescriptions for {patient.name}:"]
        if not prescriptions:
            lines.append("  (none)")
        lines.extend(f"  {p}" for p in prescriptions)
        return lines

    def run(self) -> list[str]:
        self.seed_data()
        self.build_prescription_map()

        lines = ["--- HealthSystemApp Start ---", "Patients:"]
        lines.extend(f"  {line}" for line in self.list_patients())
        lines.extend(self.list_prescriptions_for_patient(1))
        lines.extend(self.list_prescriptions_for_patient(99))
        lines.append("--- HealthSystemApp End ---")
        return lines
