import logging

import click

from stockroom.infrastructure.cli.health_commands import health
from stockroom.infrastructure.cli.inventory_commands import inventory_add, inventory_list
from stockroom.infrastructure.cli.warehouse_commands import warehouse


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Stockroom — inventory and record-keeping tools"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def inventory() -> None:
    """Manage the saved inventory."""


# Register subcommands
cli.add_command(warehouse)
cli.add_command(health)
inventory.add_command(inventory_add)
inventory.add_command(inventory_list)
