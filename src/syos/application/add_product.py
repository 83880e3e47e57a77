"""Application service: Add Product use case."""

from __future__ import annotations

from syos.domain.exceptions import DuplicateError
from syos.domain.model.product import DEFAULT_UNIT, Product
from syos.domain.model.value_objects import Money
from syos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        unit: str = DEFAULT_UNIT,
        discount_percentage: str = "0",
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            code=code,
            name=name,
            price=Money.of(price),
            unit=unit,
            discount_percentage=discount_percentage,
        )

        if self._product_repo.get_by_code(product.code) is not None:
            raise DuplicateError(f"Product '{product.code}' already exists")

        self._product_repo.save(product)
        return product
