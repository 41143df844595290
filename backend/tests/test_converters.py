"""Unit tests for permissive numeric coercion."""

from decimal import Decimal

import pytest

from dashboard.core.converters import coerce_price, coerce_stock


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, 7),
        ("7", 7),
        (" 12 ", 12),
        ("12abc", 12),
        (7.9, 7),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (True, 0),
        (-5, 0),
        ("-3", 0),
        (float("nan"), 0),
        (float("inf"), 0),
    ],
)
def test_coerce_stock(value, expected):
    assert coerce_stock(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("299.99", Decimal("299.99")),
        (24.99, Decimal("24.99")),
        (12, Decimal("12.00")),
        ("1.005", Decimal("1.00")),
        ("12abc", Decimal("12.00")),
        ("3.5kg", Decimal("3.50")),
        (" .5", Decimal("0.50")),
        ("2e3 units", Decimal("2000.00")),
        ("abc", Decimal("0.00")),
        (None, Decimal("0.00")),
        ("-1", Decimal("0.00")),
        ("NaN", Decimal("0.00")),
        ("Infinity", Decimal("0.00")),
    ],
)
def test_coerce_price(value, expected):
    assert coerce_price(value) == expected


def test_coerce_price_keeps_large_values():
    assert coerce_price("1e30") == Decimal("1000000000000000000000000000000.00")
    assert coerce_price(Decimal("123456789012345678901234567890.125")) == Decimal(
        "123456789012345678901234567890.12"
    )
