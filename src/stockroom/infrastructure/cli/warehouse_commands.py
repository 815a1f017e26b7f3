"""Interactive menu over a freshly seeded warehouse."""

from __future__ import annotations

import click

from stockroom.application.category_manager import CategoryManager
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.category import Category
from stockroom.domain.model.items import ElectronicItem, GroceryItem

_CATEGORY_CHOICES = {"1": Category.ELECTRONICS, "2": Category.GROCERIES}


def _prompt_category(action: str) -> Category:
    click.echo()
    click.echo(f"1. {action} Electronic Item")
    click.echo(f"2. {action} Grocery Item")
    choice = click.prompt("Select type", type=click.Choice(list(_CATEGORY_CHOICES)))
    return _CATEGORY_CHOICES[choice]


def _view_all(manager: CategoryManager) -> None:
    for category in Category:
        click.echo()
        click.echo(f"=== {category.label} ===")
        for item in manager.list_category(category):
            click.echo(str(item))


def _add_item(manager: CategoryManager) -> None:
    category = _prompt_category("Add")
    item_id = click.prompt("Enter Item ID", type=int)
    name = click.prompt("Enter Item Name")
    quantity = click.prompt("Enter Quantity", type=click.IntRange(min=0))

    if category is Category.ELECTRONICS:
        brand = click.prompt("Enter Brand")
        warranty = click.prompt("Enter Warranty (months)", type=click.IntRange(min=0))
        item = ElectronicItem(item_id, name, quantity, brand, warranty)
    else:
        expiry = click.prompt(
            "Enter Expiry Date (yyyy-mm-dd)", type=click.DateTime(formats=["%Y-%m-%d"])
        )
        item = GroceryItem(item_id, name, quantity, expiry.date())

    manager.add_item(category, item)
    click.echo("Item added successfully!")


def _update_quantity(manager: CategoryManager) -> None:
    category = _prompt_category("Update")
    item_id = click.prompt("Enter Item ID", type=int)
    quantity = click.prompt("Enter New Quantity", type=int)
    manager.update_quantity(category, item_id, quantity)
    click.echo("Quantity updated successfully!")


def _remove_item(manager: CategoryManager) -> None:
    category = _prompt_category("Remove")
    item_id = click.prompt("Enter Item ID", type=int)
    manager.remove_item(category, item_id)
    click.echo("Item removed successfully!")


_ACTIONS = {
    "1": _view_all,
    "2": _add_item,
    "3": _update_quantity,
    "4": _remove_item,
}


@click.command("warehouse")
def warehouse() -> None:
    """Run the interactive warehouse inventory menu."""
    manager = CategoryManager.create()
    click.echo("=== Warehouse Inventory System ===")

    while True:
        click.echo()
        click.echo("1. View All Inventory")
        click.echo("2. Add New Item")
        click.echo("3. Update Item Quantity")
        click.echo("4. Remove Item")
        click.echo("5. Exit")
        choice = click.prompt("Select option", default="", show_default=False).strip()

        if choice == "5":
            break
        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid option!")
            continue
        try:
            action(manager)
        except DomainException as exc:
            click.echo(f"Error: {exc}")

    click.echo()
    click.echo("Thank you for using the Warehouse System!")
