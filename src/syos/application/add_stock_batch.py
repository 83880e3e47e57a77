"""Application service: Add Stock Batch use case.

Receives a new lot of a product into the backroom store.  The first batch
of a product also creates its inventory record, so the handler must tell
a new record (``save``) from an existing one (``update``).
"""

from __future__ import annotations

import logging
from datetime import date

from syos.application.notification import InventorySubject
from syos.domain.exceptions import NotFoundError
from syos.domain.model.inventory import Inventory
from syos.domain.model.stock_batch import StockBatch
from syos.domain.repository.inventory_repository import InventoryRepository
from syos.domain.repository.product_repository import ProductRepository
from syos.domain.repository.stock_batch_repository import StockBatchRepository

logger = logging.getLogger(__name__)


class AddStockBatchHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        batch_repo: StockBatchRepository,
        inventory_repo: InventoryRepository,
        notifier: InventorySubject,
    ) -> None:
        self._product_repo = product_repo
        self._batch_repo = batch_repo
        self._inventory_repo = inventory_repo
        self._notifier = notifier

    def handle(self, product_code: str, quantity: int, expiry_date: date) -> StockBatch:
        product = self._product_repo.get_by_code(product_code)
        if product is None:
            raise NotFoundError(f"Product not found: {product_code}")

        batch = StockBatch.create(
            product_code=product.code,
            quantity=quantity,
            expiry_date=expiry_date,
        )

        inventory = self._inventory_repo.get_by_product_code(product.code)
        is_new = inventory is None
        if inventory is None:
            inventory = Inventory(product_code=product.code)
        inventory.add_to_store(quantity)

        self._batch_repo.save(batch)
        if is_new:
            self._inventory_repo.save(inventory)
        else:
            self._inventory_repo.update(inventory)

        logger.info(
            "Received batch %s: %d unit(s) of %s expiring %s",
            batch.batch_id, batch.quantity, product.code, batch.expiry_date,
        )

        self._notifier.notify_inventory_changed(inventory)
        return batch
