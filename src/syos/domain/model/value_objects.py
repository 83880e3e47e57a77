"""Money, quantities and percentages used on prices and bills.

All three are immutable and self-validating: an instance that exists is a
legal value.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import total_ordering

from syos.domain.exceptions import ValidationError

CENT = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount in one currency.

    Line totals, discounts and change are all Money, so a bill never
    accumulates float error.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < ZERO:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | float | int | Decimal) -> Money:
        """Build Money from user input, going through ``str`` so 0.1 stays 0.1."""
        try:
            return cls(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0.00"))

    def __add__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._check_currency(other)
        if other.amount > self.amount:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        if not isinstance(units, int):
            raise TypeError(f"Money can only be multiplied by a unit count, got {units!r}")
        return Money(self.amount * units, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def percent(self, percentage: Decimal) -> Money:
        """*percentage* percent of this amount, rounded half-up to the cent."""
        share = self.amount * percentage / HUNDRED
        return Money(share.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def _check_currency(self, other: Money) -> None:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """A count of units on a cart line: a positive int."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True units make no sense
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return f"{self.value}"


def validate_percentage(value: Decimal, label: str = "Discount percentage") -> Decimal:
    """Coerce *value* to Decimal and check it lies within 0-100."""
    try:
        pct = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label.lower()}: {value!r}") from exc
    if not pct.is_finite():
        raise ValidationError(f"Invalid {label.lower()}: {value!r}")
    if not ZERO <= pct <= HUNDRED:
        raise ValidationError(f"{label} must be between 0 and 100, got {pct}")
    return pct
