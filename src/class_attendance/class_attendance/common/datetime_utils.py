from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    try:
        return parse_iso_date((value or "").strip()).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def today_iso() -> str:
    """Current local date as ISO string.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today().isoformat()
