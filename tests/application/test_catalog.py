"""Tests for the AddProduct and ShowInventory use cases."""

import pytest

from syos.application.add_product import AddProductHandler
from syos.application.show_inventory import ShowInventoryHandler
from syos.domain.exceptions import DuplicateError
from syos.domain.model.inventory import Inventory
from syos.domain.model.value_objects import Money
from tests.fakes import FakeInventoryRepository, FakeProductRepository


class TestAddProduct:

    def test_adds_product(self):
        repo = FakeProductRepository()
        product = AddProductHandler(repo).handle("P001", "Rice", "2.50", "kg", "5")
        assert repo.get_by_code("P001") is product
        assert product.price == Money.of("2.50")

    def test_duplicate_code_rejected(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        handler.handle("P001", "Rice", "2.50")
        with pytest.raises(DuplicateError, match="'P001' already exists"):
            handler.handle("P001", "Other", "1.00")
        assert repo.get_by_code("P001").name == "Rice"


class TestShowInventory:

    def test_lines_sorted_by_code_with_reorder_flag(self):
        repo = FakeInventoryRepository([
            Inventory("P002", shelf_quantity=10),
            Inventory("P001", shelf_quantity=30, store_quantity=40, online_quantity=5),
        ])
        lines = ShowInventoryHandler(repo).handle()
        assert [line.product_code for line in lines] == ["P001", "P002"]
        assert lines[0].total == 75
        assert not lines[0].below_reorder_level
        assert lines[1].below_reorder_level

    def test_empty_inventory(self):
        assert ShowInventoryHandler(FakeInventoryRepository()).handle() == []
