"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from syos.domain.exceptions import ValidationError
from syos.domain.model.value_objects import Money, Quantity, validate_percentage


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.3")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_percent_rounds_half_up_to_cents(self):
        assert Money.of("20.00").percent(Decimal("10")) == Money.of("2.00")
        assert Money.of("0.05").percent(Decimal("50")) == Money.of("0.03")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10")


# ── Quantity / percentage ────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)


class TestPercentage:

    def test_bounds_accepted(self):
        assert validate_percentage(0) == Decimal("0")
        assert validate_percentage("100") == Decimal("100")

    @pytest.mark.parametrize("value", ["-1", "150"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            validate_percentage(value)


class TestNonFiniteAmounts:

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_money_of_rejects_non_finite(self, raw):
        with pytest.raises(ValidationError):
            Money.of(raw)

    def test_money_constructor_rejects_nan(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    @pytest.mark.parametrize("raw", ["nan", "Infinity"])
    def test_percentage_rejects_non_finite(self, raw):
        with pytest.raises(ValidationError, match="Invalid discount percentage"):
            validate_percentage(raw)


class TestSubCentPercentages:

    def test_half_cent_rounds_up(self):
        assert Money.of("0.01").percent(Decimal("50")) == Money.of("0.01")

    def test_below_half_cent_rounds_down(self):
        assert Money.of("0.04").percent(Decimal("10")) == Money.zero()

    def test_fractional_percentage_rounded_to_cent(self):
        assert Money.of("10.00").percent(Decimal("33.333")) == Money.of("3.33")
