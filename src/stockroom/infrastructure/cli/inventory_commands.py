"""CLI commands for the file-backed inventory."""

from __future__ import annotations

from pathlib import Path

import click

from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import inventory_log

_file_option = click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Snapshot file (defaults to inventory.json in the data directory).",
)


@click.command("add")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option(
    "--quantity", required=True, type=click.IntRange(min=0), help="Quantity on hand."
)
@_file_option
def inventory_add(item_id: int, name: str, quantity: int, file_path: Path | None) -> None:
    """Add an item and save the inventory."""
    log = inventory_log(file_path)

    try:
        log.load()
        item = log.add(item_id=item_id, name=name, quantity=quantity)
        count = log.save()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added item: {item}")
    click.echo(f"Saved {count} item(s)")


@click.command("list")
@_file_option
def inventory_list(file_path: Path | None) -> None:
    """Show the saved inventory."""
    log = inventory_log(file_path)

    try:
        log.load()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    items = log.list_all()
    if not items:
        click.echo("No items in inventory.")
        return

    click.echo(f"{'ID':<5} {'Name':<20} {'Qty':<5} {'Date Added'}")
    for item in items:
        click.echo(
            f"{item.id:<5} {item.name:<20} {item.quantity:<5} "
            f"{item.date_added:%Y-%m-%d %H:%M}"
        )
