from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def require_positive_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number != value and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number
