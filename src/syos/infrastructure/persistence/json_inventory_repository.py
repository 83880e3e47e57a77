"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

from syos.domain.exceptions import DuplicateError, NotFoundError
from syos.domain.model.inventory import Inventory
from syos.domain.repository.inventory_repository import InventoryRepository
from syos.infrastructure.persistence.json_file import JsonFileRepository


class JsonInventoryRepository(JsonFileRepository, InventoryRepository):

    # --- InventoryRepository interface ----------------------------------------

    def get_by_product_code(self, product_code: str) -> Inventory | None:
        for raw in self._load_raw():
            if raw["product_code"] == product_code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Inventory]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, inventory: Inventory) -> None:
        records = self._load_raw()
        if self._index_of(records, "product_code", inventory.product_code) is not None:
            raise DuplicateError(
                f"Inventory for product {inventory.product_code} already exists"
            )
        records.append(self._to_raw(inventory))
        self._persist_raw(records)

    def update(self, inventory: Inventory) -> None:
        records = self._load_raw()
        index = self._index_of(records, "product_code", inventory.product_code)
        if index is None:
            raise NotFoundError(
                f"Inventory not found for product: {inventory.product_code}"
            )
        records[index] = self._to_raw(inventory)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(inventory: Inventory) -> dict:
        return {
            "product_code": inventory.product_code,
            "shelf_quantity": inventory.shelf_quantity,
            "store_quantity": inventory.store_quantity,
            "online_quantity": inventory.online_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Inventory:
        return Inventory(
            product_code=raw["product_code"],
            shelf_quantity=raw.get("shelf_quantity", 0),
            store_quantity=raw.get("store_quantity", 0),
            online_quantity=raw.get("online_quantity", 0),
        )
