"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from syos.domain.model.bill import TransactionType


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: one cart line (product code + quantity)."""

    product_code: str
    quantity: int


@dataclass(frozen=True)
class SaleRequest:
    """Input: a whole cart as presented at the counter or online checkout."""

    items: list[SaleItemSpec] = field(default_factory=list)
    cash_tendered: Decimal = Decimal("0")
    transaction_type: TransactionType = TransactionType.COUNTER
    customer_id: str | None = None


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one product's stock as displayed to the user."""

    product_code: str
    shelf: int
    store: int
    online: int
    total: int
    below_reorder_level: bool
