"""Unit tests for the Money value object."""

from decimal import Decimal

import pytest

from model_demos.domain.exceptions import ValidationError
from model_demos.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(120.5) == Money.of("120.50")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_non_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10)

    def test_subtraction_may_go_negative(self):
        result = Money.of("5") - Money.of("10")
        assert result == Money.of("-5")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1") + Money(Decimal("1"), currency="EUR")

    def test_comparison(self):
        assert Money.of("900") > Money.of("629.50")
        assert Money.of("10") <= Money.of("10")


class TestMoneyDisplay:

    def test_two_decimals(self):
        assert str(Money.of("120.5")) == "$120.50"

    def test_thousands_separator(self):
        assert str(Money.of("1000")) == "$1,000.00"

    def test_negative(self):
        assert str(Money.of("-12")) == "-$12.00"
