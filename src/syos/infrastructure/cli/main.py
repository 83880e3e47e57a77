import logging

import click

from syos.infrastructure.cli.inventory_commands import inventory_show
from syos.infrastructure.cli.product_commands import product_add, product_list
from syos.infrastructure.cli.sale_commands import sale_counter, sale_online
from syos.infrastructure.cli.stock_commands import stock_add, stock_transfer
from syos.infrastructure.cli.user_commands import user_login, user_register


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """SYOS - retail stock and billing"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Receive and move stock."""


@cli.group()
def inventory() -> None:
    """Inspect inventory levels."""


@cli.group()
def sale() -> None:
    """Settle counter and online sales."""


@cli.group()
def user() -> None:
    """Register and authenticate online customers."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
stock.add_command(stock_add)
stock.add_command(stock_transfer)
inventory.add_command(inventory_show)
sale.add_command(sale_counter)
sale.add_command(sale_online)
user.add_command(user_register)
user.add_command(user_login)
