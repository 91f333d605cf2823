"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from finance_wrapped.domain.errors import AmountParseError, ValidationError
from finance_wrapped.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("$1,234.56", Decimal("1234.56")),
        ("(50.00)", Decimal("-50.00")),
        ("-12.3", Decimal("-12.3")),
        ("  42 ", Decimal("42")),
        ("-$7.50", Decimal("-7.50")),
        ("($1,000.00)", Decimal("-1000.00")),
        ("1,000,000", Decimal("1000000")),
    ],
)
def test_parse_amount_notations(raw, expected):
    """Currency symbols, separators and parentheses are normalized."""
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "   ", "$", "()", "12..3", "NaN", "Infinity"])
def test_parse_amount_invalid(raw):
    """Unparsable input raises AmountParseError."""
    with pytest.raises(AmountParseError):
        parse_amount(raw)


def test_amount_parse_error_is_validation_error():
    """AmountParseError keeps ValueError compatibility."""
    with pytest.raises(ValidationError):
        parse_amount("abc")
    with pytest.raises(ValueError):
        parse_amount("abc")


def test_parse_amount_keeps_decimal_precision():
    """Amounts are exact decimals, not binary floats."""
    assert parse_amount("0.10") + parse_amount("0.20") == Decimal("0.30")


@pytest.mark.parametrize("raw", ["1e5000", "-1e309", "1e999999999", "(2E+400)"])
def test_parse_amount_out_of_range(raw):
    """Values beyond what a double can hold are rejected."""
    with pytest.raises(AmountParseError):
        parse_amount(raw)


@pytest.mark.parametrize("raw", ["1_000", "$1_234.56", "-5_0"])
def test_parse_amount_rejects_underscores(raw):
    with pytest.raises(AmountParseError):
        parse_amount(raw)
