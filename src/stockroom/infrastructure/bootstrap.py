"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockroom.application.inventory_log import InventoryLog
from stockroom.infrastructure.persistence.json_inventory_store import (
    JsonInventoryStore,
)

DATA_DIR_ENV = "STOCKROOM_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return _DEFAULT_DATA_DIR


def inventory_store(file_path: Path | None = None) -> JsonInventoryStore:
    return JsonInventoryStore(file_path or data_dir() / "inventory.json")


def inventory_log(file_path: Path | None = None) -> InventoryLog:
    return InventoryLog(store=inventory_store(file_path))
