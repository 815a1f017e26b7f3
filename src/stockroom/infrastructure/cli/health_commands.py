"""Interactive menu over the seeded patient records."""

from __future__ import annotations

import click

from stockroom.application.health_records import HealthRecords
from stockroom.domain.exceptions import DomainException


def _print_patients(records: HealthRecords) -> None:
    click.echo()
    click.echo("=== Patient List ===")
    for patient in records.list_patients():
        click.echo(str(patient))


def _view_prescriptions(records: HealthRecords) -> None:
    patient_id = click.prompt("Enter Patient ID", type=int)
    prescriptions = records.prescriptions_for(patient_id)
    if not prescriptions:
        click.echo("No prescriptions found for this patient.")
        return

    click.echo()
    click.echo(f"Prescriptions for Patient ID {patient_id}:")
    for prescription in prescriptions:
        click.echo(str(prescription))


def _add_patient(records: HealthRecords) -> None:
    name = click.prompt("Enter Patient Name")
    age = click.prompt("Enter Age", type=click.IntRange(min=0))
    gender = click.prompt("Enter Gender")
    patient = records.add_patient(name, age, gender)
    click.echo(f"Patient added successfully with ID: {patient.id}")


def _add_prescription(records: HealthRecords) -> None:
    patient_id = click.prompt("Enter Patient ID", type=int)
    medication = click.prompt("Enter Medication Name")
    records.add_prescription(patient_id, medication)
    click.echo("Prescription added successfully!")


_ACTIONS = {
    "1": _print_patients,
    "2": _view_prescriptions,
    "3": _add_patient,
    "4": _add_prescription,
}


@click.command("health")
def health() -> None:
    """Run the interactive healthcare records menu."""
    records = HealthRecords.create()
    click.echo("=== Healthcare Management System ===")

    while True:
        click.echo()
        click.echo("1. View All Patients")
        click.echo("2. View Patient Prescriptions")
        click.echo("3. Add New Patient")
        click.echo("4. Add New Prescription")
        click.echo("5. Exit")
        choice = click.prompt("Select option", default="", show_default=False).strip()

        if choice == "5":
            break
        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid option!")
            continue
        try:
            action(records)
        except DomainException as exc:
            click.echo(f"Error: {exc}")

    click.echo()
    click.echo("Thank you for using the Healthcare System!")
