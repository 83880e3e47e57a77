"""JSON-file-backed implementation of StockBatchRepository."""

from __future__ import annotations

from datetime import date

from syos.domain.exceptions import DuplicateError, NotFoundError
from syos.domain.model.stock_batch import StockBatch
from syos.domain.repository.stock_batch_repository import StockBatchRepository
from syos.infrastructure.persistence.json_file import JsonFileRepository


class JsonStockBatchRepository(JsonFileRepository, StockBatchRepository):

    # --- StockBatchRepository interface ---------------------------------------

    def list_by_product_code(self, product_code: str) -> list[StockBatch]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["product_code"] == product_code
        ]

    def save(self, batch: StockBatch) -> None:
        records = self._load_raw()
        if self._index_of(records, "batch_id", batch.batch_id) is not None:
            raise DuplicateError(f"Batch {batch.batch_id} already exists")
        records.append(self._to_raw(batch))
        self._persist_raw(records)

    def update(self, batch: StockBatch) -> None:
        records = self._load_raw()
        index = self._index_of(records, "batch_id", batch.batch_id)
        if index is None:
            raise NotFoundError(f"Batch not found: {batch.batch_id}")
        records[index] = self._to_raw(batch)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(batch: StockBatch) -> dict:
        return {
            "batch_id": batch.batch_id,
            "product_code": batch.product_code,
            "purchase_date": batch.purchase_date.isoformat(),
            "quantity": batch.quantity,
            "expiry_date": batch.expiry_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockBatch:
        return StockBatch(
            batch_id=raw["batch_id"],
            product_code=raw["product_code"],
            purchase_date=date.fromisoformat(raw["purchase_date"]),
            quantity=raw["quantity"],
            expiry_date=date.fromisoformat(raw["expiry_date"]),
        )
