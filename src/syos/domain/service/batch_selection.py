"""Domain service: Batch Selection.

A BatchSelectionPolicy decides which batch stock is drawn from next.
Callers depend only on ``select_batch`` so policies can be swapped
(FIFO, earliest-expiry, ...) without touching the use cases.

Every policy ignores batches that are empty or expired, and returns None
instead of raising when nothing is eligible.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from syos.domain.model.stock_batch import StockBatch


class BatchSelectionPolicy(ABC):

    def select_batch(self, batches: Iterable[StockBatch] | None) -> StockBatch | None:
        """Return the batch to draw from next, or None if none is eligible."""
        eligible = [b for b in batches or () if b.is_available]
        if not eligible:
            return None
        # min() keeps the first of equal keys, so ties go to list order
        return min(eligible, key=self.sort_key)

    @abstractmethod
    def sort_key(self, batch: StockBatch) -> date:
        """Ordering key; the eligible batch with the smallest key wins."""


class FifoBatchSelectionPolicy(BatchSelectionPolicy):
    """First in, first out: the earliest purchase date wins."""

    def sort_key(self, batch: StockBatch) -> date:
        return batch.purchase_date


class EarliestExpiryBatchSelectionPolicy(BatchSelectionPolicy):
    """First expired, first out: the batch closest to expiry wins."""

    def sort_key(self, batch: StockBatch) -> date:
        return batch.expiry_date


def plan_draw(
    policy: BatchSelectionPolicy,
    batches: list[StockBatch],
    quantity: int,
) -> tuple[list[tuple[StockBatch, int]], int]:
    """Work out which batches supply *quantity* units, without mutating them.

    Asks the policy repeatedly, each time excluding batches already planned
    in full.  Returns ``(plan, shortfall)`` where ``plan`` lists
    ``(batch, units)`` in draw order and ``shortfall`` is the number of units
    no eligible batch could cover (0 when the plan is complete).
    """
    plan: list[tuple[StockBatch, int]] = []
    candidates = list(batches)
    remaining = quantity

    while remaining > 0:
        batch = policy.select_batch(candidates)
        if batch is None:
            break
        take = min(batch.quantity, remaining)
        plan.append((batch, take))
        remaining -= take
        candidates = [b for b in candidates if b is not batch]

    return plan, remaining
