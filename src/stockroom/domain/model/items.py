"""Stock records held by the warehouse and inventory tools.

Records are frozen: the only attribute that ever changes is ``quantity``,
and that happens by the repository swapping in an updated copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"[Electronics] ID: {self.id}, {self.name} ({self.brand}), "
            f"Qty: {self.quantity}, Warranty: {self.warranty_months} months"
        )


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, {self.name}, Qty: {self.quantity}, "
            f"Expires: {self.expiry_date.isoformat()}"
        )


@dataclass(frozen=True)
class InventoryItem:
    """A general inventory entry, stamped with the moment it was recorded."""

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, {self.name}, Qty: {self.quantity}, "
            f"Added: {self.date_added:%Y-%m-%d %H:%M}"
        )
