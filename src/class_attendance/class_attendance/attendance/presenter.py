from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary
from .view import AttendanceView

_STATUS_COLORS = {
    AttendanceStatus.PRESENT: "green",
    AttendanceStatus.ABSENT: "red",
    AttendanceStatus.LATE: "orange",
}


@dataclass(frozen=True)
class AttendanceRowUI:
    student_name: str
    class_name: str
    date: str
    status: str
    color: str
    time_in: str
    time_out: str
    remarks: str
    marked_by: str


def status_color(status) -> str:
    try:
        return _STATUS_COLORS.get(AttendanceStatus(status), "gray")
    except ValueError:
        return "gray"


def status_label(status) -> str:
    value = status.value if isinstance(status, AttendanceStatus) else str(status or "")
    return value.upper()


def show_time_fields(status: str) -> bool:
    """The single-mark form hides time inputs for absent students."""
    return status != AttendanceStatus.ABSENT.value


def to_row(r: AttendanceRecord) -> AttendanceRowUI:
    return AttendanceRowUI(
        student_name=r.student_name,
        class_name=r.class_name,
        date=r.date,
        status=status_label(r.status),
        color=status_color(r.status),
        time_in=r.time_in or "-",
        time_out=r.time_out or "-",
        remarks=r.remarks,
        marked_by=r.marked_by,
    )


def summary_cards(summary: Optional[AttendanceSummary]) -> Optional[dict]:
    if summary is None:
        return None
    return {
        "total": summary.total_records,
        "present": summary.present_count,
        "absent": summary.absent_count,
        "late": summary.late_count,
        "attendance_rate": f"{summary.attendance_rate}%",
        "absentee_rate": f"{summary.absentee_rate}%",
    }


def serialize_view(view: AttendanceView) -> dict:
    """Snapshot of everything the UI needs to render the attendance screen."""
    draft = view.mark.draft
    return {
        "filters": {"date": view.selected_date, "class_id": view.selected_class_id},
        "loading": view.loading,
        "records": [asdict(to_row(r)) for r in view.records],
        "summary": summary_cards(view.summary),
        "classes": [asdict(c) for c in view.classes],
        "students": [asdict(s) for s in view.students],
        "unmarked": [asdict(s) for s in view.unmarked],
        "can_open_bulk": view.can_open_bulk,
        "mark": {
            "state": view.mark.state.value,
            "draft": asdict(draft),
            "error": view.mark.error,
            "can_submit": view.can_submit_mark,
            "show_time_fields": show_time_fields(draft.status),
        },
        "bulk": {
            "state": view.bulk.state.value,
            "entries": {
                str(s.id): {
                    "status": view.bulk_entry(s.id).status.value,
                    "remarks": view.bulk_entry(s.id).remarks,
                }
                for s in view.unmarked
            },
            "error": view.bulk.error,
            "can_submit": view.can_submit_bulk,
        },
    }
