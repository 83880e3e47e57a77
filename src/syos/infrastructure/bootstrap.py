"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from syos.application.notification import InventoryChangeNotifier
from syos.domain.service.batch_selection import (
    BatchSelectionPolicy,
    FifoBatchSelectionPolicy,
)
from syos.infrastructure.observers.stock_alert_observer import StockAlertObserver
from syos.infrastructure.persistence.json_bill_repository import JsonBillRepository
from syos.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from syos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from syos.infrastructure.persistence.json_stock_batch_repository import (
    JsonStockBatchRepository,
)
from syos.infrastructure.persistence.json_user_repository import JsonUserRepository

DATA_DIR_ENV = "SYOS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(data_dir() / "inventory.json")


def stock_batch_repository() -> JsonStockBatchRepository:
    return JsonStockBatchRepository(data_dir() / "stock_batches.json")


def bill_repository() -> JsonBillRepository:
    return JsonBillRepository(data_dir() / "bills.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(data_dir() / "users.json")


def batch_selection_policy() -> BatchSelectionPolicy:
    return FifoBatchSelectionPolicy()


def inventory_notifier() -> InventoryChangeNotifier:
    return InventoryChangeNotifier([StockAlertObserver()])
