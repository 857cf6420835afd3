from __future__ import annotations

from decimal import Decimal, InvalidOperation


def to_decimal(value: object, *, field_name: str) -> Decimal:
    """Convert a JSON scalar into a finite Decimal.

    Raises ValueError naming the field when the value is missing, boolean,
    non-numeric or not finite.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number.")
    if not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(f"{field_name} must be a number.")
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"{field_name} must be a number.") from exc
    if not parsed.is_finite():
        raise ValueError(f"{field_name} must be finite.")
    return parsed


def to_decimal_or_none(value: object, *, field_name: str) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value, field_name=field_name)
