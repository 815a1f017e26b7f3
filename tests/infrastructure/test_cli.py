"""End-to-end tests for the click commands."""

import json

from click.testing import CliRunner

from stockroom.infrastructure.bootstrap import DATA_DIR_ENV
from stockroom.infrastructure.cli.main import cli


def _run(args, stdin=None, env=None):
    return CliRunner().invoke(cli, args, input=stdin, env=env)


class TestWarehouseMenu:

    def test_view_all_lists_seeded_stock(self):
        result = _run(["warehouse"], stdin="1\n5\n")
        assert result.exit_code == 0
        assert "=== Electronics ===" in result.output
        assert "[Electronics] ID: 1, Laptop (Dell), Qty: 10, Warranty: 24 months" in result.output
        assert "[Grocery] ID: 2, Bread, Qty: 30" in result.output
        assert result.output.index("=== Electronics ===") < result.output.index("=== Groceries ===")

    def test_negative_quantity_reported_and_loop_continues(self):
        result = _run(["warehouse"], stdin="3\n1\n1\n-3\n1\n5\n")
        assert result.exit_code == 0
        assert "Error: Quantity cannot be negative, got -3" in result.output
        assert "Laptop (Dell), Qty: 10" in result.output

    def test_add_electronic_item(self):
        stdin = "2\n1\n3\nMonitor\n7\nLG\n36\n1\n5\n"
        result = _run(["warehouse"], stdin=stdin)
        assert "Item added successfully!" in result.output
        assert "[Electronics] ID: 3, Monitor (LG), Qty: 7, Warranty: 36 months" in result.output

    def test_add_grocery_with_existing_id(self):
        stdin = "2\n2\n1\nCheese\n5\n2026-11-01\n5\n"
        result = _run(["warehouse"], stdin=stdin)
        assert "Error: Item with ID 1 already exists" in result.output

    def test_remove_missing_item(self):
        result = _run(["warehouse"], stdin="4\n2\n99\n5\n")
        assert "Error: Item with ID 99 not found" in result.output

    def test_unknown_option(self):
        result = _run(["warehouse"], stdin="9\n5\n")
        assert "Invalid option!" in result.output
        assert "Thank you for using the Warehouse System!" in result.output


class TestHealthMenu:

    def test_lists_patients(self):
        result = _run(["health"], stdin="1\n5\n")
        assert result.exit_code == 0
        assert "ID: 3, Name: Michael Johnson, Age: 45, Gender: Male" in result.output

    def test_prescriptions_for_patient(self):
        result = _run(["health"], stdin="2\n1\n5\n")
        assert "Prescriptions for Patient ID 1:" in result.output
        assert "Medication: Amoxicillin" in result.output

    def test_prescription_for_unknown_patient(self):
        result = _run(["health"], stdin="4\n42\nAspirin\n5\n")
        assert "Error: Item with ID 42 not found" in result.output

    def test_add_patient(self):
        result = _run(["health"], stdin="3\nAda Lovelace\n36\nFemale\n5\n")
        assert "Patient added successfully with ID: 4" in result.output


class TestInventoryCommands:

    def test_add_then_list(self, tmp_path):
        path = tmp_path / "inventory.json"
        added = _run(["inventory", "add", "--id", "1", "--name", "Stapler",
                      "--quantity", "4", "--file", str(path)])
        assert added.exit_code == 0
        assert "Saved 1 item(s)" in added.output

        listed = _run(["inventory", "list", "--file", str(path)])
        assert listed.exit_code == 0
        assert "Stapler" in listed.output
        assert json.loads(path.read_text(encoding="utf-8"))[0]["id"] == 1

    def test_duplicate_add_fails(self, tmp_path):
        path = tmp_path / "inventory.json"
        args = ["inventory", "add", "--id", "1", "--name", "Stapler",
                "--quantity", "4", "--file", str(path)]
        _run(args)
        result = _run(args)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_negative_quantity_rejected_by_parser(self, tmp_path):
        result = _run(["inventory", "add", "--id", "1", "--name", "Stapler",
                       "--quantity", "-1", "--file", str(tmp_path / "inv.json")])
        assert result.exit_code == 2

    def test_list_empty(self, tmp_path):
        result = _run(["inventory", "list"], env={DATA_DIR_ENV: str(tmp_path)})
        assert result.exit_code == 0
        assert "No items in inventory." in result.output

    def test_data_dir_from_environment(self, tmp_path):
        _run(["inventory", "add", "--id", "2", "--name", "Pens", "--quantity", "100"],
             env={DATA_DIR_ENV: str(tmp_path)})
        assert (tmp_path / "inventory.json").exists()
