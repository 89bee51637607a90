from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..roster.model import SchoolClass, Student
from .model import AttendanceRecord, AttendanceSummary


class AttendanceGateway(Protocol):
    """Remote attendance API as seen by the view.

    Implementations raise ApiError on any failure.
    """

    def list_records(self, *, date: str, class_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_summary(self, *, date: str, class_id: Optional[int] = None) -> AttendanceSummary:
        raise NotImplementedError

    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_classes(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def create_record(self, payload: dict) -> Optional[dict]:
        raise NotImplementedError

    def create_bulk(self, payload: dict) -> Optional[dict]:
        raise NotImplementedError


class Notifier(Protocol):
    """Toast/notification delivery owned by the UI layer."""

    def notify(self, *, title: str, description: str, level: str) -> None:
        raise NotImplementedError
