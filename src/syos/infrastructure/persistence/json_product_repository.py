"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from syos.domain.model.product import DEFAULT_UNIT, Product
from syos.domain.model.value_objects import Money
from syos.domain.repository.product_repository import ProductRepository
from syos.infrastructure.persistence.json_file import JsonFileRepository


class JsonProductRepository(JsonFileRepository, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_code(self, code: str) -> Product | None:
        for raw in self._load_raw():
            if raw["code"] == code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        index = self._index_of(records, "code", product.code)
        if index is None:
            records.append(self._to_raw(product))
        else:
            records[index] = self._to_raw(product)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "code": product.code,
            "name": product.name,
            "unit": product.unit,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "discount_percentage": str(product.discount_percentage),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            code=raw["code"],
            name=raw["name"],
            unit=raw.get("unit", DEFAULT_UNIT),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            discount_percentage=Decimal(raw.get("discount_percentage", "0")),
        )
