"""Abstract repository for Inventory aggregate.

Implementations must give read-modify-write isolation per product code;
use cases load, mutate and write back one Inventory per call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from syos.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_product_code(self, product_code: str) -> Inventory | None:
        """Return the inventory record for a product, or None."""

    @abstractmethod
    def list_all(self) -> list[Inventory]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, inventory: Inventory) -> None:
        """Insert a new inventory record."""

    @abstractmethod
    def update(self, inventory: Inventory) -> None:
        """Overwrite an existing inventory record."""
