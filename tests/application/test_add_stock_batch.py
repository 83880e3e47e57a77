"""Integration tests for the AddStockBatch use case."""

from datetime import date, timedelta

import pytest

from syos.application.add_stock_batch import AddStockBatchHandler
from syos.domain.exceptions import NotFoundError, ValidationError
from syos.domain.model.inventory import Inventory
from syos.domain.model.product import Product
from syos.domain.model.value_objects import Money
from tests.fakes import (
    FakeInventoryRepository,
    FakeProductRepository,
    FakeStockBatchRepository,
    RecordingSubject,
)

EXPIRY = date.today() + timedelta(days=90)


def _setup(inventories: list[Inventory] | None = None):
    product_repo = FakeProductRepository([Product.create("P001", "Rice", Money.of("2.00"))])
    batch_repo = FakeStockBatchRepository()
    inventory_repo = FakeInventoryRepository(inventories or [])
    subject = RecordingSubject()
    handler = AddStockBatchHandler(product_repo, batch_repo, inventory_repo, subject)
    return handler, batch_repo, inventory_repo, subject


class TestAddStockBatch:

    def test_first_batch_creates_inventory(self):
        handler, _, inventory_repo, _ = _setup()
        handler.handle("P001", 100, EXPIRY)
        inv = inventory_repo.get_by_product_code("P001")
        assert inv.store_quantity == 100
        assert inv.shelf_quantity == 0
        assert inventory_repo.saved == [inv]
        assert inventory_repo.updated == []

    def test_later_batch_updates_existing_inventory(self):
        existing = Inventory("P001", shelf_quantity=5, store_quantity=20)
        handler, _, inventory_repo, _ = _setup([existing])
        handler.handle("P001", 30, EXPIRY)
        assert existing.store_quantity == 50
        assert existing.shelf_quantity == 5
        assert inventory_repo.saved == []
        assert inventory_repo.updated == [existing]

    def test_batch_is_saved_and_returned(self):
        handler, batch_repo, _, _ = _setup()
        batch = handler.handle("P001", 100, EXPIRY)
        assert batch_repo.saved == [batch]
        assert batch.quantity == 100
        assert batch.expiry_date == EXPIRY
        assert batch.purchase_date == date.today()

    def test_notifies_observers(self):
        handler, _, _, subject = _setup()
        handler.handle("P001", 10, EXPIRY)
        assert [i.product_code for i in subject.notified] == ["P001"]

    def test_unknown_product_rejected(self):
        handler, batch_repo, inventory_repo, subject = _setup()
        with pytest.raises(NotFoundError, match="Product not found: P404"):
            handler.handle("P404", 10, EXPIRY)
        assert batch_repo.saved == []
        assert inventory_repo.saved == []
        assert subject.notified == []

    def test_invalid_batch_touches_nothing(self):
        existing = Inventory("P001", store_quantity=20)
        handler, batch_repo, inventory_repo, _ = _setup([existing])
        with pytest.raises(ValidationError):
            handler.handle("P001", 0, EXPIRY)
        assert existing.store_quantity == 20
        assert batch_repo.saved == []
        assert inventory_repo.updated == []
