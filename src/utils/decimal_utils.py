"""Helpers for Decimal normalization of ledger amounts."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so SQLite REAL columns keep their printed
    value rather than the binary expansion.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized amount, zero when the value is missing.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a nullable numeric column, keeping None."""
    if value is None:
        return None
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal"]
