"""Patient and prescription records for the healthcare tool."""

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
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Medication: {self.medication_name}, Date: {self.date_issued.isoformat()}, "
            f"For Patient ID: {self.patient_id}"
        )
