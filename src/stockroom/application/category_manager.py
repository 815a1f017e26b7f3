"""Application service: the category-partitioned warehouse.

Owns one KeyedRepository per Category and routes every operation to the
repository of the requested category. Categories are independent key
spaces: the same id may exist in both without conflict.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from stockroom.domain.model.category import Category
from stockroom.domain.model.items import ElectronicItem, GroceryItem
from stockroom.domain.repository.keyed_repository import KeyedRepository

logger = logging.getLogger(__name__)

WarehouseItem = ElectronicItem | GroceryItem


@dataclass(frozen=True)
class CategorizedItem:
    """Output: one listed record tagged with the category it came from."""

    category: Category
    item: WarehouseItem


class CategoryManager:

    def __init__(self) -> None:
        self._repos: dict[Category, KeyedRepository] = {
            Category.ELECTRONICS: KeyedRepository[ElectronicItem]("electronics"),
            Category.GROCERIES: KeyedRepository[GroceryItem]("groceries"),
        }

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(today: date | None = None) -> CategoryManager:
        """Build a manager pre-loaded with the starter stock."""
        manager = CategoryManager()
        manager.seed(today or date.today())
        return manager

    def seed(self, today: date) -> None:
        """Load the starter stock.

        Meant for a freshly built manager only: a second call raises
        DuplicateKeyError on the first starter id.
        """
        electronics = self._repos[Category.ELECTRONICS]
        electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        electronics.add(ElectronicItem(2, "Smartphone", 25, "Samsung", 12))

        groceries = self._repos[Category.GROCERIES]
        groceries.add(GroceryItem(1, "Milk", 50, today + timedelta(days=7)))
        groceries.add(GroceryItem(2, "Bread", 30, today + timedelta(days=3)))
        logger.info("Seeded warehouse with starter stock")

    # --- Commands -------------------------------------------------------------

    def add_item(self, category: Category, item: WarehouseItem) -> None:
        self._repos[category].add(item)

    def update_quantity(self, category: Category, item_id: int, quantity: int) -> None:
        self._repos[category].update_quantity(item_id, quantity)

    def remove_item(self, category: Category, item_id: int) -> None:
        self._repos[category].remove(item_id)

    # --- Queries --------------------------------------------------------------

    def get_item(self, category: Category, item_id: int) -> WarehouseItem:
        return self._repos[category].get(item_id)

    def list_category(self, category: Category) -> list[WarehouseItem]:
        return self._repos[category].list_all()

    def list_all(self) -> list[CategorizedItem]:
        """Every record of every category, electronics first."""
        return [
            CategorizedItem(category=category, item=item)
            for category in Category
            for item in self._repos[category].list_all()
        ]
