"""Generic in-memory repository keyed by record id.

One instance holds one record type. It is the single place where identity
uniqueness and the non-negative quantity rule are enforced, so every
variant (warehouse, inventory, healthcare) shares the same guarantees.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Generic, Iterable, TypeVar

from stockroom.domain.exceptions import (
    DuplicateKeyError,
    InvalidQuantityError,
    NotFoundError,
)
from stockroom.domain.model.entity import Keyed

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Keyed)


class KeyedRepository(Generic[T]):
    """Uniqueness-enforcing id -> record store.

    Invariants:
    - at most one record per id; ``add`` never overwrites
    - ``get(id)`` succeeds iff ``id`` was added and not removed since
    - records are frozen dataclasses, so anything handed out is safe
      from (and cannot affect) later changes to the store
    """

    def __init__(self, name: str = "items") -> None:
        self._name = name
        self._items: dict[int, T] = {}

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: int) -> T:
        try:
            return self._items[item_id]
        except KeyError:
            raise NotFoundError(item_id) from None

    def list_all(self) -> list[T]:
        """Return a snapshot of every record in insertion order."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    # --- Mutations ------------------------------------------------------------

    def add(self, item: T) -> None:
        if item.id in self._items:
            raise DuplicateKeyError(item.id)
        self._items[item.id] = item
        logger.debug("%s: added id=%s", self._name, item.id)

    def remove(self, item_id: int) -> None:
        if item_id not in self._items:
            raise NotFoundError(item_id)
        del self._items[item_id]
        logger.debug("%s: removed id=%s", self._name, item_id)

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the quantity of an existing record.

        The quantity is validated before the id is looked up, so a negative
        quantity on a missing id reports ``InvalidQuantityError``. Only
        ``quantity`` changes; the record keeps its position in listings.
        """
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)
        current = self.get(item_id)
        self._items[item_id] = dataclasses.replace(current, quantity=new_quantity)
        logger.debug(
            "%s: quantity of id=%s set to %s", self._name, item_id, new_quantity
        )

    def replace_all(self, items: Iterable[T]) -> None:
        """Discard every record and load *items* in their given order.

        When *items* repeats an id the first occurrence is kept and later
        ones are dropped.
        """
        restored: dict[int, T] = {}
        dropped = 0
        for item in items:
            if item.id in restored:
                dropped += 1
                continue
            restored[item.id] = item
        self._items = restored
        if dropped:
            logger.debug(
                "%s: dropped %d record(s) with repeated ids while restoring",
                self._name,
                dropped,
            )
        logger.debug("%s: replaced contents with %d record(s)", self._name, len(restored))
