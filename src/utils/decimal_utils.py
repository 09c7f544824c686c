"""Helpers for Decimal normalization of monetary amounts."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize a nullable amount to Decimal.

    Args:
        value: Raw amount from SQL rows or adapters (None, str, int,
            float or Decimal).

    Returns:
        Decimal: Normalized amount, zero when the value is missing.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str) and not value.strip():
        return Decimal("0")
    return Decimal(str(value))


def exceeds_threshold(value, threshold: Decimal) -> bool:
    """Return True when the absolute amount is strictly above threshold."""
    return abs(coerce_decimal(value)) > threshold


__all__ = ["coerce_decimal", "exceeds_threshold"]
