"""
Unit tests for display formatting helpers.
"""
from decimal import Decimal

import pytest

from mail_extraction.output.formatting import format_currency, format_phone, phone_digits


class TestPhone:
    @pytest.mark.parametrize(
        "raw",
        ["305-555-1234", "305.555.1234", "(305) 555-1234", "+1 305 555 1234", "1-305-555-1234"],
    )
    def test_north_american_shapes(self, raw):
        assert format_phone(raw) == "(305) 555-1234"

    def test_extension_ignored(self):
        assert phone_digits("(305) 555-1234 ext. 22") == "3055551234"
        assert format_phone("305-555-1234 ext. 22") == "(305) 555-1234"

    def test_other_shapes_unchanged(self):
        assert format_phone("+44 20 7946 0958") == "+44 20 7946 0958"


class TestCurrency:
    def test_symbol_currencies(self):
        assert format_currency(Decimal("1234.5"), "USD") == "$1,234.50"
        assert format_currency(Decimal("80"), "EUR") == "€80.00"

    def test_code_prefix_for_unknown_symbol(self):
        assert format_currency(Decimal("1500"), "CAD") == "CAD 1,500.00"
