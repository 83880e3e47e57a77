"""Console observer that reports inventory changes and reorder alerts."""

from __future__ import annotations

import click

from syos.application.notification import InventoryObserver
from syos.domain.model.inventory import REORDER_THRESHOLD, Inventory


class StockAlertObserver(InventoryObserver):

    def on_inventory_changed(self, inventory: Inventory) -> None:
        click.echo(
            f"[INFO] Inventory updated - Product: {inventory.product_code}, "
            f"Total: {inventory.total_quantity} "
            f"(Shelf: {inventory.shelf_quantity}, Store: {inventory.store_quantity}, "
            f"Online: {inventory.online_quantity})"
        )

    def on_low_stock(self, inventory: Inventory) -> None:
        click.secho(
            f"[ALERT] Low stock - Product: {inventory.product_code}, "
            f"Current: {inventory.total_quantity}, Reorder level: {REORDER_THRESHOLD}. "
            f"Reorder required.",
            fg="yellow",
        )
