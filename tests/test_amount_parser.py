"""Tests for amount parser."""

import pytest
from decimal import Decimal
from finflow.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$20", Decimal("20")),
        ("1,234.56", Decimal("1234.56")),
        (" 7 ", Decimal("7")),
        ("€ 3.50", Decimal("3.50")),
        ("-5", Decimal("-5")),
    ],
)
def test_parse_amount(text, expected):
    """Test parsing amounts with symbols, separators and signs."""
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "abc", "1.2.3", "inf", "NaN"])
def test_parse_amount_invalid(text):
    """Test that non-numeric amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)
