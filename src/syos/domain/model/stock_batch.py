"""StockBatch entity: one dated, expiring lot of a product.

Batches are never deleted. A batch drawn down to zero stays on record as
purchase history.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date

from syos.domain.exceptions import InsufficientQuantityError, ValidationError


@dataclass
class StockBatch:
    """A lot of one product received on ``purchase_date``.

    Use ``StockBatch.create()`` when stock is received: it additionally
    requires a positive quantity.  The ``__init__`` accepts zero so the
    repository can reconstitute exhausted batches.
    """

    product_code: str
    purchase_date: date
    quantity: int
    expiry_date: date
    batch_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not self.product_code or not self.product_code.strip():
            raise ValidationError("Product code is required")
        if self.quantity < 0:
            raise ValidationError("Batch quantity cannot be negative")
        if self.expiry_date < self.purchase_date:
            raise ValidationError(
                f"Expiry date {self.expiry_date} is before purchase date "
                f"{self.purchase_date}"
            )

    # --- Factory (used for NEW batches only) ----------------------------------

    @staticmethod
    def create(
        product_code: str,
        quantity: int,
        expiry_date: date,
        purchase_date: date | None = None,
        batch_id: str | None = None,
    ) -> StockBatch:
        if not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Batch quantity must be positive")
        batch = StockBatch(
            product_code=product_code,
            purchase_date=purchase_date or date.today(),
            quantity=quantity,
            expiry_date=expiry_date,
        )
        if batch_id:
            batch.batch_id = batch_id
        return batch

    # --- Mutations ------------------------------------------------------------

    def reduce_quantity(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to reduce must be positive")
        if quantity > self.quantity:
            raise InsufficientQuantityError(
                f"Batch {self.batch_id} holds only {self.quantity} units, "
                f"cannot draw {quantity}"
            )
        self.quantity -= quantity

    # --- Queries --------------------------------------------------------------

    def is_expired(self, today: date | None = None) -> bool:
        return (today or date.today()) > self.expiry_date

    def days_until_expiry(self, today: date | None = None) -> int:
        return (self.expiry_date - (today or date.today())).days

    @property
    def is_available(self) -> bool:
        """True if the batch can still supply stock today."""
        return self.quantity > 0 and not self.is_expired()
