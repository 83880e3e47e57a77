"""CLI commands for receiving and transferring stock."""

from __future__ import annotations

from datetime import datetime

import click

from syos.application.add_stock_batch import AddStockBatchHandler
from syos.application.transfer_stock import TransferDirection, TransferStockHandler
from syos.domain.exceptions import DomainException
from syos.infrastructure.bootstrap import (
    batch_selection_policy,
    inventory_notifier,
    inventory_repository,
    product_repository,
    stock_batch_repository,
)

_DIRECTIONS = {
    "shelf": TransferDirection.STORE_TO_SHELF,
    "online": TransferDirection.STORE_TO_ONLINE,
}


@click.command("add")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option(
    "--expiry", required=True, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Expiry date (YYYY-MM-DD).",
)
def stock_add(product_code: str, quantity: int, expiry: datetime) -> None:
    """Receive a new batch into the store."""
    handler = AddStockBatchHandler(
        product_repo=product_repository(),
        batch_repo=stock_batch_repository(),
        inventory_repo=inventory_repository(),
        notifier=inventory_notifier(),
    )

    try:
        batch = handler.handle(
            product_code=product_code, quantity=quantity, expiry_date=expiry.date()
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Batch {batch.batch_id} received: {batch.quantity} x {batch.product_code} "
        f"(expires {batch.expiry_date})"
    )


@click.command("transfer")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units to move.")
@click.option(
    "--to", "target", required=True, type=click.Choice(sorted(_DIRECTIONS)),
    help="Destination location.",
)
def stock_transfer(product_code: str, quantity: int, target: str) -> None:
    """Move stock from the store to the shelf or online reserve."""
    handler = TransferStockHandler(
        inventory_repo=inventory_repository(),
        batch_repo=stock_batch_repository(),
        selection_policy=batch_selection_policy(),
        notifier=inventory_notifier(),
    )

    try:
        result = handler.handle(
            product_code=product_code, quantity=quantity, direction=_DIRECTIONS[target]
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Moved {result.quantity} x {result.product_code} from store to {target}")
    for batch_id, units in result.drawn:
        click.echo(f"  batch {batch_id}: {units}")
