"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from storage, CSV cells or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def safe_percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part`` as a percentage of ``whole``.

    A zero ``whole`` yields ``Decimal("0")`` instead of raising.
    """
    if not whole:
        return Decimal("0")
    return (part / whole) * Decimal("100")


__all__ = ["coerce_decimal", "safe_percentage"]
