"""Bill value object: the immutable record of one settled sale.

A Bill is built once through ``Bill.create()``, which validates everything
before producing the frozen instance.  Nothing ever mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from syos.domain.exceptions import ValidationError
from syos.domain.model.value_objects import Money, Quantity, validate_percentage


class TransactionType(Enum):
    COUNTER = "COUNTER"
    ONLINE = "ONLINE"


@dataclass(frozen=True)
class BillItem:
    """One priced line of a bill.

    ``unit_price`` and ``discount_percentage`` are a snapshot of the product
    at the time of sale.
    """

    product_code: str
    product_name: str
    unit: str
    quantity: Quantity
    unit_price: Money
    discount_percentage: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not self.product_code:
            raise ValidationError("Bill item requires a product code")
        # Normalise so a frozen instance always holds a checked Decimal.
        object.__setattr__(
            self, "discount_percentage", validate_percentage(self.discount_percentage)
        )

    @property
    def item_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def discount_amount(self) -> Money:
        return self.item_total.percent(self.discount_percentage)

    @property
    def final_price(self) -> Money:
        return self.item_total - self.discount_amount


@dataclass(frozen=True)
class Bill:
    """Immutable settled sale.

    Use ``Bill.create()``; the plain constructor exists so a repository can
    reconstitute stored bills without re-validating.
    """

    serial_number: int
    items: tuple[BillItem, ...]
    cash_tendered: Money
    transaction_type: TransactionType = TransactionType.COUNTER
    customer_id: str | None = None
    bill_date: datetime = field(default_factory=datetime.now)

    @staticmethod
    def create(
        serial_number: int,
        items: list[BillItem] | tuple[BillItem, ...],
        cash_tendered: Money,
        transaction_type: TransactionType = TransactionType.COUNTER,
        customer_id: str | None = None,
        bill_date: datetime | None = None,
    ) -> Bill:
        """Validate a sale and return the finished Bill."""
        if not items:
            raise ValidationError("Bill must have at least one item")
        if transaction_type is TransactionType.ONLINE and not (
            customer_id and customer_id.strip()
        ):
            raise ValidationError("Online sales require a customer ID")

        bill = Bill(
            serial_number=serial_number,
            items=tuple(items),
            cash_tendered=cash_tendered,
            transaction_type=transaction_type,
            customer_id=customer_id.strip() if customer_id else None,
            bill_date=bill_date or datetime.now(),
        )

        if bill.cash_tendered < bill.total:
            raise ValidationError("Cash tendered must be greater than or equal to total")

        return bill

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        return sum((item.item_total for item in self.items), Money.zero())

    @property
    def discount(self) -> Money:
        return sum((item.discount_amount for item in self.items), Money.zero())

    @property
    def total(self) -> Money:
        return self.subtotal - self.discount

    @property
    def change(self) -> Money:
        return self.cash_tendered - self.total
