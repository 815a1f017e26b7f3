"""Application service: the single-list inventory with file snapshots."""

from __future__ import annotations

from datetime import datetime

from stockroom.domain.model.items import InventoryItem
from stockroom.domain.repository.keyed_repository import KeyedRepository
from stockroom.domain.repository.snapshot_store import SnapshotStore


class InventoryLog:
    """Keyed inventory whose contents can be saved to and restored from a store.

    Saving writes the current listing; loading replaces everything held
    in memory with what the store returns.
    """

    def __init__(self, store: SnapshotStore[InventoryItem]) -> None:
        self._store = store
        self._repo: KeyedRepository[InventoryItem] = KeyedRepository("inventory")

    def add(
        self,
        item_id: int,
        name: str,
        quantity: int,
        added_at: datetime | None = None,
    ) -> InventoryItem:
        item = InventoryItem(
            id=item_id,
            name=name,
            quantity=quantity,
            date_added=added_at or datetime.now(),
        )
        self._repo.add(item)
        return item

    def list_all(self) -> list[InventoryItem]:
        return self._repo.list_all()

    def save(self) -> int:
        """Write the current listing to the store; return the record count."""
        items = self._repo.list_all()
        self._store.save(items)
        return len(items)

    def load(self) -> int:
        """Restore from the store; return how many records were loaded.

        An empty or missing snapshot leaves the current contents untouched
        and returns 0.
        """
        items = self._store.load()
        if not items:
            return 0
        self._repo.replace_all(items)
        return len(self._repo)
