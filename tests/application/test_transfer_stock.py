"""Integration tests for the TransferStock use case."""

from datetime import date, timedelta

import pytest

from syos.application.transfer_stock import TransferDirection, TransferStockHandler
from syos.domain.exceptions import (
    InsufficientStockError,
    NoAvailableBatchError,
    NotFoundError,
    ValidationError,
)
from syos.domain.model.inventory import Inventory
from syos.domain.model.stock_batch import StockBatch
from syos.domain.service.batch_selection import (
    EarliestExpiryBatchSelectionPolicy,
    FifoBatchSelectionPolicy,
)
from tests.fakes import FakeInventoryRepository, FakeStockBatchRepository, RecordingSubject

TODAY = date.today()


def _batch(batch_id, purchased_days_ago, qty, expires_in_days=180) -> StockBatch:
    return StockBatch(
        product_code="P001",
        purchase_date=TODAY - timedelta(days=purchased_days_ago),
        quantity=qty,
        expiry_date=TODAY + timedelta(days=expires_in_days),
        batch_id=batch_id,
    )


def _setup(store=100, batches=None, policy=None):
    if batches is None:
        batches = [_batch("B1", 10, store)]
    inventory_repo = FakeInventoryRepository([Inventory("P001", store_quantity=store)])
    batch_repo = FakeStockBatchRepository(batches)
    subject = RecordingSubject()
    handler = TransferStockHandler(
        inventory_repo, batch_repo, policy or FifoBatchSelectionPolicy(), subject
    )
    return handler, inventory_repo, batch_repo, subject


class TestTransferHappyPath:

    def test_store_to_shelf(self):
        handler, inventory_repo, batch_repo, _ = _setup()
        handler.handle("P001", 30, TransferDirection.STORE_TO_SHELF)
        inv = inventory_repo.get_by_product_code("P001")
        assert inv.store_quantity == 70
        assert inv.shelf_quantity == 30
        assert inv.total_quantity == 100
        assert batch_repo.list_by_product_code("P001")[0].quantity == 70

    def test_store_to_online(self):
        handler, inventory_repo, _, _ = _setup()
        handler.handle("P001", 25, TransferDirection.STORE_TO_ONLINE)
        inv = inventory_repo.get_by_product_code("P001")
        assert inv.store_quantity == 75
        assert inv.online_quantity == 25
        assert inv.shelf_quantity == 0

    def test_result_lists_drawn_batches(self):
        handler, _, _, _ = _setup()
        result = handler.handle("P001", 30, TransferDirection.STORE_TO_SHELF)
        assert result.product_code == "P001"
        assert result.quantity == 30
        assert result.direction is TransferDirection.STORE_TO_SHELF
        assert result.drawn == [("B1", 30)]

    def test_persists_and_notifies(self):
        handler, inventory_repo, batch_repo, subject = _setup()
        handler.handle("P001", 10, TransferDirection.STORE_TO_SHELF)
        assert len(inventory_repo.updated) == 1
        assert [b.batch_id for b in batch_repo.updated] == ["B1"]
        assert len(subject.notified) == 1

    def test_fifo_draws_oldest_batch_first(self):
        old = _batch("OLD", 20, 50)
        new = _batch("NEW", 2, 50)
        handler, _, _, _ = _setup(store=100, batches=[new, old])
        handler.handle("P001", 20, TransferDirection.STORE_TO_SHELF)
        assert old.quantity == 30
        assert new.quantity == 50

    def test_earliest_expiry_policy(self):
        long_life = _batch("LONG", 20, 50, expires_in_days=300)
        short_life = _batch("SHORT", 2, 50, expires_in_days=5)
        handler, _, _, _ = _setup(
            store=100,
            batches=[long_life, short_life],
            policy=EarliestExpiryBatchSelectionPolicy(),
        )
        handler.handle("P001", 20, TransferDirection.STORE_TO_SHELF)
        assert short_life.quantity == 30
        assert long_life.quantity == 50


class TestMultiBatchTransfer:

    def test_spills_into_next_batch(self):
        first = _batch("B1", 10, 20)
        second = _batch("B2", 5, 80)
        handler, inventory_repo, batch_repo, _ = _setup(store=100, batches=[first, second])
        result = handler.handle("P001", 50, TransferDirection.STORE_TO_SHELF)
        assert result.drawn == [("B1", 20), ("B2", 30)]
        assert first.quantity == 0
        assert second.quantity == 50
        assert {b.batch_id for b in batch_repo.updated} == {"B1", "B2"}
        assert inventory_repo.get_by_product_code("P001").shelf_quantity == 50

    def test_expired_batches_cannot_cover_transfer(self):
        expired = StockBatch(
            "P001", TODAY - timedelta(days=60), 80, TODAY - timedelta(days=1), "OLD"
        )
        fresh = _batch("B2", 5, 20)
        handler, inventory_repo, batch_repo, subject = _setup(
            store=100, batches=[expired, fresh]
        )
        with pytest.raises(NoAvailableBatchError, match="short by 10"):
            handler.handle("P001", 30, TransferDirection.STORE_TO_SHELF)
        assert fresh.quantity == 20
        assert expired.quantity == 80
        assert inventory_repo.get_by_product_code("P001").store_quantity == 100
        assert batch_repo.updated == []
        assert subject.notified == []


class TestTransferFailures:

    def test_unknown_inventory(self):
        handler, _, _, _ = _setup()
        with pytest.raises(NotFoundError, match="Inventory not found for product: P999"):
            handler.handle("P999", 1, TransferDirection.STORE_TO_SHELF)

    def test_insufficient_store_quantity(self):
        handler, inventory_repo, _, subject = _setup(store=10)
        with pytest.raises(InsufficientStockError, match="requested 11, available 10"):
            handler.handle("P001", 11, TransferDirection.STORE_TO_SHELF)
        assert inventory_repo.get_by_product_code("P001").store_quantity == 10
        assert subject.notified == []

    def test_no_batches_at_all(self):
        handler, inventory_repo, _, _ = _setup(store=40, batches=[])
        with pytest.raises(NoAvailableBatchError, match="No available batches for product P001"):
            handler.handle("P001", 5, TransferDirection.STORE_TO_ONLINE)
        inv = inventory_repo.get_by_product_code("P001")
        assert inv.store_quantity == 40
        assert inv.online_quantity == 0

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity(self, qty):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("P001", qty, TransferDirection.STORE_TO_SHELF)
