"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from syos.application.add_product import AddProductHandler
from syos.domain.exceptions import DomainException
from syos.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--code", required=True, help="Product code.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 150.00).")
@click.option("--unit", default="pcs", show_default=True, help="Unit of sale.")
@click.option("--discount", default="0", show_default=True, help="Discount percentage.")
def product_add(code: str, name: str, price: str, unit: str, discount: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            code=code, name=name, price=price, unit=unit, discount_percentage=discount
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.code} '{product.name}' added at {product.price}/{product.unit}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'Code':<10} {'Name':<20} {'Unit':<6} {'Price':>10} {'Disc %':>7} {'Net':>10}"
    )
    click.echo("-" * 68)
    for p in products:
        click.echo(
            f"{p.code:<10} {p.name:<20} {p.unit:<6} {str(p.price):>10} "
            f"{p.discount_percentage:>7} {str(p.discounted_price):>10}"
        )
