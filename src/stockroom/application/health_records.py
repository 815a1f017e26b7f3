"""Application service: patients and their prescriptions.

Both record types live in their own KeyedRepository; ids are assigned
here, one past the highest id currently held.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.health import Patient, Prescription
from stockroom.domain.repository.keyed_repository import KeyedRepository

logger = logging.getLogger(__name__)


def _next_id(repo: KeyedRepository) -> int:
    existing = repo.list_all()
    if not existing:
        return 1
    return max(record.id for record in existing) + 1


class HealthRecords:

    def __init__(self) -> None:
        self._patients: KeyedRepository[Patient] = KeyedRepository("patients")
        self._prescriptions: KeyedRepository[Prescription] = KeyedRepository(
            "prescriptions"
        )

    @staticmethod
    def create(today: date | None = None) -> HealthRecords:
        """Build the records pre-loaded with sample patients and prescriptions."""
        records = HealthRecords()
        records.seed(today or date.today())
        return records

    def seed(self, today: date) -> None:
        self._patients.add(Patient(1, "John Doe", 35, "Male"))
        self._patients.add(Patient(2, "Jane Smith", 28, "Female"))
        self._patients.add(Patient(3, "Michael Johnson", 45, "Male"))

        self._prescriptions.add(Prescription(1, 1, "Ibuprofen", today - timedelta(days=7)))
        self._prescriptions.add(Prescription(2, 1, "Amoxicillin", today - timedelta(days=3)))
        self._prescriptions.add(Prescription(3, 2, "Paracetamol", today - timedelta(days=5)))
        self._prescriptions.add(Prescription(4, 3, "Lisinopril", today - timedelta(days=1)))
        logger.info("Seeded health records with sample patients")

    # --- Commands -------------------------------------------------------------

    def add_patient(self, name: str, age: int, gender: str) -> Patient:
        if not name or not name.strip():
            raise ValidationError("Patient name is required")
        patient = Patient(
            id=_next_id(self._patients),
            name=name.strip(),
            age=age,
            gender=gender.strip(),
        )
        self._patients.add(patient)
        return patient

    def add_prescription(
        self,
        patient_id: int,
        medication_name: str,
        issued: date | None = None,
    ) -> Prescription:
        """Record a prescription for an existing patient.

        Raises NotFoundError if the patient does not exist.
        """
        if not medication_name or not medication_name.strip():
            raise ValidationError("Medication name is required")
        self._patients.get(patient_id)

        prescription = Prescription(
            id=_next_id(self._prescriptions),
            patient_id=patient_id,
            medication_name=medication_name.strip(),
            date_issued=issued or date.today(),
        )
        self._prescriptions.add(prescription)
        return prescription

    # --- Queries --------------------------------------------------------------

    def get_patient(self, patient_id: int) -> Patient:
        return self._patients.get(patient_id)

    def list_patients(self) -> list[Patient]:
        return self._patients.list_all()

    def prescriptions_by_patient(self) -> dict[int, list[Prescription]]:
        grouped: dict[int, list[Prescription]] = {}
        for prescription in self._prescriptions.list_all():
            grouped.setdefault(prescription.patient_id, []).append(prescription)
        return grouped

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        return self.prescriptions_by_patient().get(patient_id, [])
