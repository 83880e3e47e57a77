"""Application service: Process Sale use case.

Turns a cart into a settled Bill while debiting the channel's location:
the shelf for COUNTER sales, the online reserve for ONLINE sales.

Uses a two-phase approach so a failed sale leaves every collaborator
untouched:
  Phase 1 - load and validate: resolve every product and inventory, check
            the aggregated demand per product against the channel's
            location, price the lines and build the Bill.
  Phase 2 - mutate and persist: reduce each inventory, write it back,
            store the bill, then notify observers.

Batches are not touched here.  A batch is debited once, when its stock
leaves the store through a transfer, so shelf and online stock is already
traced to a non-expired lot.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from syos.application.dto import SaleRequest
from syos.application.notification import InventorySubject
from syos.domain.exceptions import (
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from syos.domain.model.bill import Bill, BillItem, TransactionType
from syos.domain.model.inventory import Inventory, Location
from syos.domain.model.value_objects import Money, Quantity
from syos.domain.repository.bill_repository import BillRepository
from syos.domain.repository.inventory_repository import InventoryRepository
from syos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

CHANNEL_LOCATIONS = {
    TransactionType.COUNTER: Location.SHELF,
    TransactionType.ONLINE: Location.ONLINE,
}


class ProcessSaleHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
        bill_repo: BillRepository,
        notifier: InventorySubject,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo
        self._bill_repo = bill_repo
        self._notifier = notifier

    def handle(self, request: SaleRequest | None) -> Bill:
        """Settle a sale and return the immutable Bill."""
        if request is None:
            raise ValidationError("Sale request cannot be null")
        if not request.items:
            raise ValidationError("Sale must have at least one item")

        cash_tendered = self._parse_cash(request.cash_tendered)
        if request.transaction_type is TransactionType.ONLINE and not (
            request.customer_id and request.customer_id.strip()
        ):
            raise ValidationError("Online sales require a customer ID")

        location = CHANNEL_LOCATIONS[request.transaction_type]

        # Phase 1: load, validate and price every line
        inventories: dict[str, Inventory] = {}
        demand: dict[str, int] = {}
        bill_items: list[BillItem] = []

        for spec in request.items:
            quantity = Quantity(spec.quantity)
            product = self._product_repo.get_by_code(spec.product_code)
            if product is None:
                raise NotFoundError(f"Product not found: {spec.product_code}")

            inventory = inventories.get(product.code)
            if inventory is None:
                inventory = self._inventory_repo.get_by_product_code(product.code)
                if inventory is None:
                    raise NotFoundError(
                        f"Inventory not found for product: {product.code}"
                    )
                inventories[product.code] = inventory

            demand[product.code] = demand.get(product.code, 0) + quantity.value
            available = inventory.quantity_at(location)
            if demand[product.code] > available:
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} ({product.code}) "
                    f"on {location.value}: requested {demand[product.code]}, "
                    f"available {available}"
                )

            bill_items.append(
                BillItem(
                    product_code=product.code,
                    product_name=product.name,
                    unit=product.unit,
                    quantity=quantity,
                    unit_price=product.price,  # <-- price snapshot
                    discount_percentage=product.discount_percentage,
                )
            )

        bill = Bill.create(
            serial_number=self._bill_repo.next_serial_number(),
            items=bill_items,
            cash_tendered=cash_tendered,
            transaction_type=request.transaction_type,
            customer_id=request.customer_id,
        )

        # Phase 2: mutate and persist
        for code, inventory in inventories.items():
            inventory.reduce(location, demand[code])
            self._inventory_repo.update(inventory)
        self._bill_repo.save(bill)

        logger.info(
            "Bill #%d settled: %s sale of %d line(s), total %s",
            bill.serial_number, bill.transaction_type.value,
            len(bill.items), bill.total,
        )

        for inventory in inventories.values():
            self._notifier.notify_inventory_changed(inventory)

        return bill

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _parse_cash(raw: Decimal | str | int) -> Money:
        try:
            amount = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid cash amount: {raw!r}") from exc
        if not amount.is_finite():
            raise ValidationError(f"Invalid cash amount: {raw!r}")
        if amount < 0:
            raise ValidationError("Cash tendered cannot be negative")
        return Money(amount)
