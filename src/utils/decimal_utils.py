"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON or adapters.

    Returns:
        Decimal: Normalized numeric value; None and blank strings map to 0.

    Raises:
        TypeError: If the value is not numeric or a string.
        ValueError: If the value cannot be read as a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Not a finite value: {value!r}")
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean values are not numeric amounts")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    elif not isinstance(value, (int, float)):
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")
    return result


__all__ = ["coerce_decimal"]
