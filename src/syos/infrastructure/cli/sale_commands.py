"""CLI commands for settling sales."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from syos.application.dto import SaleItemSpec, SaleRequest
from syos.application.process_sale import ProcessSaleHandler
from syos.domain.exceptions import DomainException
from syos.domain.model.bill import Bill, TransactionType
from syos.infrastructure.bootstrap import (
    bill_repository,
    inventory_notifier,
    inventory_repository,
    product_repository,
)


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse 'P001:3,P002:5' into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductCode:Quantity'."
            )
        code, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{code}'."
            )
        specs.append(SaleItemSpec(product_code=code.strip(), quantity=qty))
    return specs


def _parse_cash(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid cash amount '{raw}'.")


def _settle(request: SaleRequest) -> None:
    handler = ProcessSaleHandler(
        product_repo=product_repository(),
        inventory_repo=inventory_repository(),
        bill_repo=bill_repository(),
        notifier=inventory_notifier(),
    )

    try:
        bill = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(bill)


def _display_bill(bill: Bill) -> None:
    click.echo(f"Bill #{bill.serial_number}  ({bill.transaction_type.value})")
    click.echo(f"Date: {bill.bill_date:%Y-%m-%d %H:%M}")
    if bill.customer_id:
        click.echo(f"Customer: {bill.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Disc':>9} {'Amount':>10}")
    click.echo(f"  {'-'*58}")
    for item in bill.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity.value:>5} {str(item.unit_price):>10} "
            f"{str(item.discount_amount):>9} {str(item.final_price):>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Subtotal':<46} {str(bill.subtotal):>12}")
    click.echo(f"  {'Discount':<46} {str(bill.discount):>12}")
    click.echo(f"  {'Total':<46} {str(bill.total):>12}")
    click.echo(f"  {'Cash':<46} {str(bill.cash_tendered):>12}")
    click.echo(f"  {'Change':<46} {str(bill.change):>12}")


@click.command("counter")
@click.option("--items", required=True, help="Items as 'Code:Qty,Code:Qty'.")
@click.option("--cash", required=True, help="Cash tendered.")
def sale_counter(items: str, cash: str) -> None:
    """Settle an over-the-counter sale from the shelf."""
    _settle(
        SaleRequest(
            items=_parse_items(items),
            cash_tendered=_parse_cash(cash),
            transaction_type=TransactionType.COUNTER,
        )
    )


@click.command("online")
@click.option("--items", required=True, help="Items as 'Code:Qty,Code:Qty'.")
@click.option("--cash", required=True, help="Amount paid.")
@click.option("--customer", required=True, help="Customer (user) ID.")
def sale_online(items: str, cash: str, customer: str) -> None:
    """Settle an online order from the online reserve."""
    _settle(
        SaleRequest(
            items=_parse_items(items),
            cash_tendered=_parse_cash(cash),
            transaction_type=TransactionType.ONLINE,
            customer_id=customer,
        )
    )
