"""Abstract repository for StockBatch entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from syos.domain.model.stock_batch import StockBatch


class StockBatchRepository(ABC):

    @abstractmethod
    def list_by_product_code(self, product_code: str) -> list[StockBatch]:
        """Return every batch of a product, exhausted ones included."""

    @abstractmethod
    def save(self, batch: StockBatch) -> None:
        """Insert a newly received batch."""

    @abstractmethod
    def update(self, batch: StockBatch) -> None:
        """Overwrite an existing batch after its quantity changed."""
