"""Inventory change notification (observer / subject).

Use cases call ``notify_inventory_changed`` after a mutation has been
persisted.  Observers run synchronously, in subscription order.  A failing
observer is logged and skipped: it never aborts the remaining observers or
the use case that triggered the notification.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from syos.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class InventoryObserver(ABC):

    @abstractmethod
    def on_inventory_changed(self, inventory: Inventory) -> None:
        """Called after every successful inventory mutation."""

    @abstractmethod
    def on_low_stock(self, inventory: Inventory) -> None:
        """Called when total quantity has dropped below the reorder level."""


class InventorySubject(ABC):

    @abstractmethod
    def subscribe(self, observer: InventoryObserver) -> None:
        """Register *observer* for future notifications."""

    @abstractmethod
    def notify_inventory_changed(self, inventory: Inventory) -> None:
        """Broadcast a change of *inventory* to every observer."""


class InventoryChangeNotifier(InventorySubject):

    def __init__(self, observers: list[InventoryObserver] | None = None) -> None:
        self._observers: list[InventoryObserver] = []
        for observer in observers or []:
            self.subscribe(observer)

    @property
    def observers(self) -> tuple[InventoryObserver, ...]:
        return tuple(self._observers)

    def subscribe(self, observer: InventoryObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: InventoryObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_inventory_changed(self, inventory: Inventory) -> None:
        low_stock = inventory.is_below_reorder_level()
        logger.debug(
            "Notifying %d observer(s) of change to %s (low_stock=%s)",
            len(self._observers), inventory.product_code, low_stock,
        )
        # Iterate over a snapshot so an observer may unsubscribe itself.
        for observer in list(self._observers):
            self._dispatch(observer.on_inventory_changed, inventory)
            if low_stock:
                self._dispatch(observer.on_low_stock, inventory)

    @staticmethod
    def _dispatch(callback: Callable[[Inventory], None], inventory: Inventory) -> None:
        try:
            callback(inventory)
        except Exception:
            logger.exception(
                "Inventory observer %r failed for product %s",
                callback, inventory.product_code,
            )
