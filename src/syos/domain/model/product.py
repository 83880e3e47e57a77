"""Product aggregate.

Products live independently of inventory and bills.  A bill captures the
price and discount of a product at the time of sale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from syos.domain.exceptions import ValidationError
from syos.domain.model.value_objects import Money, validate_percentage

DEFAULT_UNIT = "pcs"


@dataclass(eq=False)
class Product:
    """A product in the catalog, identified by its ``code``.

    Two products with the same code are the same product regardless of
    name or price.
    """

    code: str
    name: str
    price: Money
    unit: str = DEFAULT_UNIT
    discount_percentage: Decimal = field(default_factory=lambda: Decimal("0"))

    @staticmethod
    def create(
        code: str,
        name: str,
        price: Money,
        unit: str = DEFAULT_UNIT,
        discount_percentage: Decimal | str | int = Decimal("0"),
    ) -> Product:
        """Create a new catalog product, enforcing all invariants."""
        if not code or not code.strip():
            raise ValidationError("Product code is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            code=code.strip(),
            name=name.strip(),
            price=price,
            unit=(unit or DEFAULT_UNIT).strip(),
            discount_percentage=validate_percentage(discount_percentage),
        )

    @property
    def discounted_price(self) -> Money:
        return self.price - self.price.percent(self.discount_percentage)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
