"""Tests for InventoryChangeNotifier dispatch and failure isolation."""

import logging

from syos.application.notification import InventoryChangeNotifier
from syos.domain.model.inventory import Inventory
from tests.fakes import FailingObserver, RecordingObserver


class TestSubscription:

    def test_subscribe_is_idempotent(self):
        observer = RecordingObserver()
        notifier = InventoryChangeNotifier()
        notifier.subscribe(observer)
        notifier.subscribe(observer)
        assert notifier.observers == (observer,)

    def test_unsubscribe_stops_notifications(self):
        observer = RecordingObserver()
        notifier = InventoryChangeNotifier([observer])
        notifier.unsubscribe(observer)
        notifier.notify_inventory_changed(Inventory("P001", store_quantity=10))
        assert observer.changed == []

    def test_unsubscribe_unknown_observer_is_noop(self):
        notifier = InventoryChangeNotifier()
        notifier.unsubscribe(RecordingObserver())
        assert notifier.observers == ()


class TestNotify:

    def test_healthy_stock_only_reports_change(self):
        observer = RecordingObserver()
        InventoryChangeNotifier([observer]).notify_inventory_changed(
            Inventory("P001", store_quantity=500)
        )
        assert len(observer.changed) == 1
        assert observer.low_stock == []

    def test_low_stock_reports_change_then_alert(self):
        log: list[str] = []
        observer = RecordingObserver("a", log)
        InventoryChangeNotifier([observer]).notify_inventory_changed(
            Inventory("P001", store_quantity=10)
        )
        assert log == ["a:changed", "a:low"]

    def test_observers_run_in_subscription_order(self):
        log: list[str] = []
        first = RecordingObserver("first", log)
        second = RecordingObserver("second", log)
        InventoryChangeNotifier([first, second]).notify_inventory_changed(
            Inventory("P001", store_quantity=10)
        )
        assert log == ["first:changed", "first:low", "second:changed", "second:low"]

    def test_failing_observer_does_not_stop_others(self, caplog):
        healthy = RecordingObserver()
        notifier = InventoryChangeNotifier([FailingObserver(), healthy])
        with caplog.at_level(logging.ERROR, logger="syos.application.notification"):
            notifier.notify_inventory_changed(Inventory("P001", store_quantity=10))
        assert len(healthy.changed) == 1
        assert len(healthy.low_stock) == 1
        failures = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(failures) == 2
        assert all(r.exc_info for r in failures)
