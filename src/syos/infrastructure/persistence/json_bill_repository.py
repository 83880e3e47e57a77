"""JSON-file-backed implementation of BillRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from syos.domain.exceptions import DuplicateError
from syos.domain.model.bill import Bill, BillItem, TransactionType
from syos.domain.model.value_objects import Money, Quantity
from syos.domain.repository.bill_repository import BillRepository
from syos.infrastructure.persistence.json_file import JsonFileRepository


class JsonBillRepository(JsonFileRepository, BillRepository):

    # --- BillRepository interface ---------------------------------------------

    def next_serial_number(self) -> int:
        bills = self._load_raw()
        if not bills:
            return 1
        return max(b["serial_number"] for b in bills) + 1

    def save(self, bill: Bill) -> None:
        records = self._load_raw()
        if any(raw["serial_number"] == bill.serial_number for raw in records):
            raise DuplicateError(f"Bill #{bill.serial_number} already exists")
        records.append(self._to_raw(bill))
        self._persist_raw(records)

    def list_all(self) -> list[Bill]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(bill: Bill) -> dict:
        return {
            "serial_number": bill.serial_number,
            "bill_date": bill.bill_date.isoformat(),
            "transaction_type": bill.transaction_type.value,
            "customer_id": bill.customer_id,
            "cash_tendered": str(bill.cash_tendered.amount),
            "currency": bill.cash_tendered.currency,
            "items": [
                {
                    "product_code": item.product_code,
                    "product_name": item.product_name,
                    "unit": item.unit,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "discount_percentage": str(item.discount_percentage),
                }
                for item in bill.items
            ],
            # Derived totals are stored for reporting only; never read back.
            "total": str(bill.total.amount),
            "change": str(bill.change.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Bill:
        currency = raw.get("currency", "USD")
        items = tuple(
            BillItem(
                product_code=i["product_code"],
                product_name=i["product_name"],
                unit=i["unit"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
                discount_percentage=Decimal(i["discount_percentage"]),
            )
            for i in raw["items"]
        )
        return Bill(
            serial_number=raw["serial_number"],
            items=items,
            cash_tendered=Money(Decimal(raw["cash_tendered"]), currency),
            transaction_type=TransactionType(raw["transaction_type"]),
            customer_id=raw.get("customer_id"),
            bill_date=datetime.fromisoformat(raw["bill_date"]),
        )
