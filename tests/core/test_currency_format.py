"""
Tests for display-only money formatting.
"""

from decimal import Decimal

from depositlab.core.currency import (
    EUR,
    INR,
    USD,
    Currency,
    RoundingPolicy,
    get_currency,
)


class TestCurrencyQuantization:
    def test_half_up_default(self):
        assert INR.quantize(Decimal("1.005")) == Decimal("1.01")

    def test_bankers(self):
        c = Currency("INR", decimals=2, rounding=RoundingPolicy.BANKERS)
        assert c.quantize(Decimal("1.225")) == Decimal("1.22")

    def test_whole_rupees(self):
        c = Currency("INR", decimals=0)
        assert c.quantize(Decimal("99.5")) == Decimal("100")

    def test_non_finite_shows_zero(self):
        assert INR.quantize(float("nan")) == Decimal("0.00")
        assert INR.format(float("inf")) == "₹0.00"


class TestCurrencyFormat:
    def test_indian_grouping(self):
        assert INR.format(1234567.891) == "₹12,34,567.89"

    def test_indian_grouping_small(self):
        assert INR.format(999) == "₹999.00"
        assert INR.format(100000) == "₹1,00,000.00"

    def test_western_grouping(self):
        assert USD.format(1234567.891) == "$1,234,567.89"
        assert EUR.format(0.5) == "€0.50"

    def test_negative(self):
        assert INR.format(-250000) == "-₹2,50,000.00"


class TestGetCurrency:
    def test_known_case_insensitive(self):
        assert get_currency("inr") is INR

    def test_unknown_gets_plain_two_decimals(self):
        c = get_currency("gbp")
        assert c.code == "GBP"
        assert c.format(1234.5) == "1,234.50"
