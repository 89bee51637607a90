from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the API."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        """Accept user input; blank means present, anything unknown is rejected."""
        if isinstance(value, cls):
            return value
        v = str(value or "").strip().lower()
        if not v:
            return cls.PRESENT
        try:
            return cls(v)
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {value}")


class DialogState(str, Enum):
    """Lifecycle of a mark/bulk dialog."""

    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"
