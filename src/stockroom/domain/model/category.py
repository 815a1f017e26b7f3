"""Fixed item categories of the warehouse."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    # Declaration order is the display order.
    ELECTRONICS = "electronics"
    GROCERIES = "groceries"

    @property
    def label(self) -> str:
        return self.value.capitalize()
