"""Tests for Decimal helpers."""

from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal, safe_percentage


def test_coerce_decimal_handles_storage_values() -> None:
    assert coerce_decimal("-12.34") == Decimal("-12.34")
    assert coerce_decimal(3) == Decimal("3")
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal("n/a") == Decimal("0")


def test_safe_percentage_zero_whole() -> None:
    """A zero total yields zero instead of raising."""
    assert safe_percentage(Decimal("5"), Decimal("0")) == Decimal("0")
    assert safe_percentage(Decimal("25"), Decimal("200")) == Decimal("12.5")
