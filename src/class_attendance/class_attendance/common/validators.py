from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    v = "" if value is None else str(value)
    if not v.strip():
        raise ValidationError(f"{field_name} is required")
    return v.strip()


def require_int(value, field_name: str) -> int:
    v = require_non_empty(value, field_name)
    try:
        return int(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number")
