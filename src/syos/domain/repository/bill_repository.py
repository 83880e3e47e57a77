"""Abstract repository for settled bills."""

from __future__ import annotations

from abc import ABC, abstractmethod

from syos.domain.model.bill import Bill


class BillRepository(ABC):

    @abstractmethod
    def next_serial_number(self) -> int:
        """Return the serial number the next bill should carry."""

    @abstractmethod
    def save(self, bill: Bill) -> None:
        """Persist a settled bill."""
