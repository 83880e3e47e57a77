"""Application service: Transfer Stock use case.

Moves units out of the backroom store onto the shelf or into the online
reserve.  Stock may only leave the store if it can be traced to
non-expired batches, which are drawn down in the order the selection
policy chooses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from syos.application.notification import InventorySubject
from syos.domain.exceptions import (
    InsufficientStockError,
    NoAvailableBatchError,
    NotFoundError,
)
from syos.domain.model.inventory import Location
from syos.domain.model.value_objects import Quantity
from syos.domain.repository.inventory_repository import InventoryRepository
from syos.domain.repository.stock_batch_repository import StockBatchRepository
from syos.domain.service.batch_selection import BatchSelectionPolicy, plan_draw

logger = logging.getLogger(__name__)


class TransferDirection(Enum):
    STORE_TO_SHELF = "STORE_TO_SHELF"
    STORE_TO_ONLINE = "STORE_TO_ONLINE"

    @property
    def target(self) -> Location:
        return Location.SHELF if self is TransferDirection.STORE_TO_SHELF else Location.ONLINE


@dataclass(frozen=True)
class TransferResult:
    product_code: str
    quantity: int
    direction: TransferDirection
    drawn: list[tuple[str, int]]  # (batch_id, units) in draw order


class TransferStockHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        batch_repo: StockBatchRepository,
        selection_policy: BatchSelectionPolicy,
        notifier: InventorySubject,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._batch_repo = batch_repo
        self._selection_policy = selection_policy
        self._notifier = notifier

    def handle(
        self,
        product_code: str,
        quantity: int,
        direction: TransferDirection,
    ) -> TransferResult:
        """Transfer *quantity* units of a product out of the store.

        Steps:
        1. Load the inventory (fail if absent).
        2. Check the store holds enough units.
        3. Plan which batches supply the units (fail if they cannot).
        4. Draw the batches down and move the units between locations.
        5. Persist inventory and batches, then notify observers.
        """
        qty = Quantity(quantity).value

        inventory = self._inventory_repo.get_by_product_code(product_code)
        if inventory is None:
            raise NotFoundError(f"Inventory not found for product: {product_code}")

        if inventory.store_quantity < qty:
            raise InsufficientStockError(
                f"Insufficient store quantity for {product_code}: "
                f"requested {qty}, available {inventory.store_quantity}"
            )

        batches = self._batch_repo.list_by_product_code(product_code)
        plan, shortfall = plan_draw(self._selection_policy, batches, qty)
        if not plan:
            raise NoAvailableBatchError(
                f"No available batches for product {product_code}"
            )
        if shortfall:
            raise NoAvailableBatchError(
                f"No available batches to cover {qty} units of {product_code} "
                f"(short by {shortfall})"
            )

        for batch, units in plan:
            batch.reduce_quantity(units)
        inventory.transfer_from_store(direction.target, qty)

        self._inventory_repo.update(inventory)
        for batch, _ in plan:
            self._batch_repo.update(batch)

        logger.info(
            "Transferred %d unit(s) of %s %s from %d batch(es)",
            qty, product_code, direction.value, len(plan),
        )

        self._notifier.notify_inventory_changed(inventory)

        return TransferResult(
            product_code=product_code,
            quantity=qty,
            direction=direction,
            drawn=[(batch.batch_id, units) for batch, units in plan],
        )
