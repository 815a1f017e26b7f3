"""Integration tests for the HealthRecords use case."""

from datetime import date

import pytest

from stockroom.application.health_records import HealthRecords
from stockroom.domain.exceptions import NotFoundError, ValidationError

TODAY = date(2026, 10, 18)


class TestSeed:

    def test_seeds_three_patients(self):
        records = HealthRecords.create(TODAY)
        assert [p.name for p in records.list_patients()] == [
            "John Doe", "Jane Smith", "Michael Johnson",
        ]

    def test_prescriptions_grouped_by_patient(self):
        records = HealthRecords.create(TODAY)
        grouped = records.prescriptions_by_patient()
        assert [rx.medication_name for rx in grouped[1]] == ["Ibuprofen", "Amoxicillin"]
        assert [rx.medication_name for rx in grouped[2]] == ["Paracetamol"]
        assert grouped[3][0].date_issued == date(2026, 10, 17)


class TestAddPatient:

    def test_assigns_next_id(self):
        records = HealthRecords.create(TODAY)
        patient = records.add_patient("Ada Lovelace", 36, "Female")
        assert patient.id == 4
        assert records.get_patient(4) == patient

    def test_first_patient_gets_id_one(self):
        records = HealthRecords()
        assert records.add_patient("Ada Lovelace", 36, "Female").id == 1

    def test_blank_name_rejected(self):
        records = HealthRecords()
        with pytest.raises(ValidationError, match="name is required"):
            records.add_patient("  ", 36, "Female")


class TestAddPrescription:

    def test_added_prescription_listed_for_patient(self):
        records = HealthRecords.create(TODAY)
        rx = records.add_prescription(2, "Cetirizine", issued=TODAY)
        assert rx.id == 5
        assert records.prescriptions_for(2)[-1] == rx

    def test_unknown_patient_rejected(self):
        records = HealthRecords.create(TODAY)
        with pytest.raises(NotFoundError):
            records.add_prescription(42, "Cetirizine")
        assert records.prescriptions_for(42) == []

    def test_patient_without_prescriptions(self):
        records = HealthRecords.create(TODAY)
        patient = records.add_patient("Ada Lovelace", 36, "Female")
        assert records.prescriptions_for(patient.id) == []
