"""CLI commands for inventory inspection."""

from __future__ import annotations

import click

from syos.application.show_inventory import ShowInventoryHandler
from syos.infrastructure.bootstrap import inventory_repository


@click.command("show")
def inventory_show() -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(inventory_repo=inventory_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<12} {'Shelf':>7} {'Store':>7} {'Online':>7} {'Total':>7}")
    click.echo("-" * 44)
    for line in lines:
        flag = "  REORDER" if line.below_reorder_level else ""
        click.echo(
            f"{line.product_code:<12} {line.shelf:>7} {line.store:>7} "
            f"{line.online:>7} {line.total:>7}{flag}"
        )
