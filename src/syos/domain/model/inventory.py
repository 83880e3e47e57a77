"""Inventory aggregate: per-product stock across the three locations.

Each product has one Inventory record that knows how many units sit in the
backroom store, on the counter-facing shelf, and in the online reserve.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from syos.domain.exceptions import InsufficientQuantityError, ValidationError

# Total quantity below which a low-stock alert fires.
REORDER_THRESHOLD = 50


class Location(Enum):
    STORE = "store"
    SHELF = "shelf"
    ONLINE = "online"


@dataclass
class Inventory:
    """Aggregate root for location-level stock of one product.

    Invariants:
    - ``product_code`` is non-empty and never changes
    - every location quantity is >= 0 at every observable point

    Reductions check before they mutate, so a rejected call leaves all
    quantities untouched.
    """

    product_code: str
    shelf_quantity: int = 0
    store_quantity: int = 0
    online_quantity: int = 0

    def __post_init__(self) -> None:
        if not self.product_code or not self.product_code.strip():
            raise ValidationError("Product code is required")
        for location in Location:
            if self.quantity_at(location) < 0:
                raise ValidationError(
                    f"{location.value.capitalize()} quantity cannot be negative"
                )

    # --- Queries --------------------------------------------------------------

    @property
    def total_quantity(self) -> int:
        return self.shelf_quantity + self.store_quantity + self.online_quantity

    def is_below_reorder_level(self) -> bool:
        return self.total_quantity < REORDER_THRESHOLD

    def quantity_at(self, location: Location) -> int:
        return getattr(self, f"{location.value}_quantity")

    # --- Location-generic mutations -------------------------------------------

    def add(self, location: Location, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")
        self._set(location, self.quantity_at(location) + quantity)

    def reduce(self, location: Location, quantity: int) -> None:
        """Remove *quantity* units from one location.

        Raises InsufficientQuantityError if the location holds fewer units.
        """
        if quantity <= 0:
            raise ValidationError("Quantity to reduce must be positive")
        current = self.quantity_at(location)
        if quantity > current:
            raise InsufficientQuantityError(
                f"Cannot reduce {location.value} quantity of {self.product_code} "
                f"by {quantity} (only {current} available)"
            )
        self._set(location, current - quantity)

    def transfer_from_store(self, target: Location, quantity: int) -> None:
        """Move units out of the store into *target* as one step."""
        if target is Location.STORE:
            raise ValidationError("Cannot transfer from store to store")
        self.reduce(Location.STORE, quantity)
        self.add(target, quantity)

    # --- Named operations -----------------------------------------------------

    def add_to_shelf(self, quantity: int) -> None:
        self.add(Location.SHELF, quantity)

    def add_to_store(self, quantity: int) -> None:
        self.add(Location.STORE, quantity)

    def add_to_online(self, quantity: int) -> None:
        self.add(Location.ONLINE, quantity)

    def reduce_from_shelf(self, quantity: int) -> None:
        self.reduce(Location.SHELF, quantity)

    def reduce_from_store(self, quantity: int) -> None:
        self.reduce(Location.STORE, quantity)

    def reduce_from_online(self, quantity: int) -> None:
        self.reduce(Location.ONLINE, quantity)

    def transfer_from_store_to_shelf(self, quantity: int) -> None:
        self.transfer_from_store(Location.SHELF, quantity)

    def transfer_from_store_to_online(self, quantity: int) -> None:
        self.transfer_from_store(Location.ONLINE, quantity)

    # --- Internal helpers -----------------------------------------------------

    def _set(self, location: Location, value: int) -> None:
        setattr(self, f"{location.value}_quantity", value)
