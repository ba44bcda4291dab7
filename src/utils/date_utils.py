"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize date-like values to a calendar date.

    Args:
        value: Raw value from SQL or adapters (date, datetime, ISO string).

    Returns:
        date | None: Calendar date, or None when the value is empty.

    Raises:
        ValueError: If a string value is not ISO formatted.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError as exc:
        raise ValueError(f"Invalid date value: {value!r}") from exc


def coerce_datetime(value) -> datetime | None:
    """Normalize timestamp-like values to a datetime.

    Args:
        value: Raw value from SQL or adapters.

    Returns:
        datetime | None: Parsed timestamp, or None when the value is empty.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value).strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Invalid timestamp value: {value!r}") from exc


__all__ = ["coerce_date", "coerce_datetime"]
