"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from syos.application.dto import InventoryLineDTO
from syos.domain.repository.inventory_repository import InventoryRepository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        inventories = sorted(self._inventory_repo.list_all(), key=lambda i: i.product_code)
        return [
            InventoryLineDTO(
                product_code=inv.product_code,
                shelf=inv.shelf_quantity,
                store=inv.store_quantity,
                online=inv.online_quantity,
                total=inv.total_quantity,
                below_reorder_level=inv.is_below_reorder_level(),
            )
            for inv in inventories
        ]
