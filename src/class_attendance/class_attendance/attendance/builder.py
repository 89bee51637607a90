"""Turn drafts into the payloads the attendance API expects.

Pure functions: no I/O. Invalid input raises ValidationError so the caller can
abort before any request is made.
"""
from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import require_iso_date
from ..common.validators import require_int, require_non_empty
from ..core.constants import MSG_NOTHING_TO_MARK
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import BulkDraft, MarkDraft, SessionTimes


def _optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def build_single_payload(draft: MarkDraft) -> dict:
    student_id = require_int(draft.student_id, "Student")
    class_id = require_int(draft.class_id, "Class")
    day = require_iso_date(require_non_empty(draft.date, "Date"))
    status = AttendanceStatus.parse(draft.status)

    return {
        "studentId": student_id,
        "classId": class_id,
        "date": day,
        "status": status.value,
        # Times are sent exactly as entered on the single-record path.
        "timeIn": _optional_text(draft.time_in),
        "timeOut": _optional_text(draft.time_out),
        "remarks": draft.remarks or "",
    }


def build_bulk_records(
    draft: BulkDraft,
    *,
    class_id,
    date: str,
    session: Optional[SessionTimes] = None,
) -> list[dict]:
    session = session or SessionTimes()
    records = []
    for student_id, entry in draft.entries.items():
        absent = entry.status == AttendanceStatus.ABSENT
        records.append(
            {
                "studentId": int(student_id),
                "classId": int(class_id),
                "date": date,
                "status": entry.status.value,
                "timeIn": None if absent else session.time_in,
                "timeOut": None if absent else session.time_out,
                "remarks": entry.remarks or "",
            }
        )
    return records


def build_bulk_payload(
    draft: BulkDraft,
    *,
    class_id,
    date: str,
    session: Optional[SessionTimes] = None,
) -> dict:
    if not draft.entries:
        raise ValidationError(MSG_NOTHING_TO_MARK)
    cid = require_int(class_id, "Class")
    day = require_iso_date(require_non_empty(date, "Date"))
    records = build_bulk_records(draft, class_id=cid, date=day, session=session)
    if not records:
        raise ValidationError(MSG_NOTHING_TO_MARK)
    return {"attendanceRecords": records}
