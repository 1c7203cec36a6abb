"""Unit tests for rupee display formatting."""

from __future__ import annotations

import pytest

from auctionboard.display.currency import format_inr, format_price, group_indian


class TestFormatInr:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0, "₹0"),
            (999, "₹999"),
            (12500, "₹12,500"),
            (125000, "₹1,25,000"),
            (12345678, "₹1,23,45,678"),
            (12500.5, "₹12,501"),
            (12500.4, "₹12,500"),
            (-45000, "-₹45,000"),
        ],
    )
    def test_indian_grouping(self, amount, expected):
        assert format_inr(amount) == expected

    def test_group_indian(self):
        assert group_indian("1000000") == "10,00,000"


class TestFormatPrice:
    def test_inr(self):
        assert format_price(45000, "inr") == "₹45,000"

    def test_unsupported_currency(self):
        with pytest.raises(ValueError):
            format_price(10, "USD")
