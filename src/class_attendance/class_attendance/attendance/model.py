from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..core.constants import DEFAULT_SESSION_TIME_IN, DEFAULT_SESSION_TIME_OUT
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one date (server mirror)."""

    id: int
    student_id: int
    student_name: str
    class_id: int
    class_name: str
    date: str
    status: AttendanceStatus
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    remarks: str = ""
    marked_by: str = ""
    created_at: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "AttendanceRecord":
        return cls(
            id=int(data["id"]),
            student_id=int(data["studentId"]),
            student_name=str(data.get("studentName") or ""),
            class_id=int(data["classId"]),
            class_name=str(data.get("className") or ""),
            date=str(data.get("date") or ""),
            status=AttendanceStatus(data["status"]),
            time_in=data.get("timeIn"),
            time_out=data.get("timeOut"),
            remarks=data.get("remarks") or "",
            marked_by=str(data.get("markedBy") or ""),
            created_at=str(data.get("createdAt") or ""),
        )


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model computed by the server for a date/class filter."""

    total_records: int
    present_count: int
    absent_count: int
    late_count: int
    attendance_rate: str
    absentee_rate: str

    @classmethod
    def from_api(cls, data: dict) -> "AttendanceSummary":
        return cls(
            total_records=int(data.get("totalRecords") or 0),
            present_count=int(data.get("presentCount") or 0),
            absent_count=int(data.get("absentCount") or 0),
            late_count=int(data.get("lateCount") or 0),
            attendance_rate=str(data.get("attendanceRate") or "0"),
            absentee_rate=str(data.get("absenteeRate") or "0"),
        )


@dataclass(frozen=True)
class SessionTimes:
    """Standard school-day times applied to non-absent bulk entries."""

    time_in: str = DEFAULT_SESSION_TIME_IN
    time_out: str = DEFAULT_SESSION_TIME_OUT


@dataclass
class MarkDraft:
    """Single-record form buffer. Everything stays a string until submission."""

    student_id: str = ""
    class_id: str = ""
    date: str = ""
    status: str = AttendanceStatus.PRESENT.value
    time_in: str = ""
    time_out: str = ""
    remarks: str = ""

    @classmethod
    def blank(cls, date: str) -> "MarkDraft":
        return cls(date=date)


@dataclass
class BulkEntry:
    status: AttendanceStatus = AttendanceStatus.PRESENT
    remarks: str = ""


@dataclass
class BulkDraft:
    """Pending bulk decisions keyed by student id, filled lazily per row."""

    entries: Dict[int, BulkEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, student_id: int) -> BulkEntry:
        """Read an entry without creating it (unset rows read as present)."""
        return self.entries.get(int(student_id)) or BulkEntry()

    def set_status(self, student_id: int, status: AttendanceStatus) -> None:
        entry = self.entries.setdefault(int(student_id), BulkEntry())
        entry.status = status

    def set_remarks(self, student_id: int, remarks: str) -> None:
        entry = self.entries.setdefault(int(student_id), BulkEntry())
        entry.remarks = remarks or ""
