"""JSON-file-backed implementation of SnapshotStore for inventory items."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from stockroom.domain.exceptions import SnapshotError
from stockroom.domain.model.items import InventoryItem
from stockroom.domain.repository.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class JsonInventoryStore(SnapshotStore[InventoryItem]):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SnapshotStore interface ----------------------------------------------

    def load(self) -> list[InventoryItem]:
        if not self._file_path.exists():
            logger.info("No saved inventory at %s", self._file_path)
            return []
        try:
            items = [self._to_domain(raw) for raw in self._load_raw()]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(
                f"Cannot read inventory snapshot {self._file_path}: {exc}"
            ) from exc
        logger.info("Loaded %d item(s) from %s", len(items), self._file_path)
        return items

    def save(self, items: list[InventoryItem]) -> None:
        self._persist_raw([self._to_raw(item) for item in items])
        logger.info("Saved %d item(s) to %s", len(items), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
            "date_added": item.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=int(raw["id"]),
            name=raw["name"],
            quantity=int(raw["quantity"]),
            date_added=datetime.fromisoformat(raw["date_added"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        text = self._file_path.read_text(encoding="utf-8")
        if not text.strip():
            return []
        return json.loads(text)

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
