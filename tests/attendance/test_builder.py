import pytest

from src.class_attendance.class_attendance.attendance.builder import build_bulk_payload, build_single_payload
from src.class_attendance.class_attendance.attendance.model import BulkDraft, MarkDraft, SessionTimes
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import ValidationError


def test_single_payload_coerces_ids_and_passes_times_through():
    draft = MarkDraft(
        student_id="7",
        class_id="3",
        date="2024-03-01",
        status="late",
        time_in="09:20",
        time_out="",
        remarks="bus",
    )

    payload = build_single_payload(draft)

    assert payload == {
        "studentId": 7,
        "classId": 3,
        "date": "2024-03-01",
        "status": "late",
        "timeIn": "09:20",
        "timeOut": None,
        "remarks": "bus",
    }


def test_single_payload_status_defaults_to_present():
    payload = build_single_payload(MarkDraft(student_id="1", class_id="2", date="2024-03-01", status=""))
    assert payload["status"] == "present"


def test_single_payload_does_not_infer_times_for_absent():
    draft = MarkDraft(student_id="1", class_id="2", date="2024-03-01", status="absent", time_in="08:00")
    assert build_single_payload(draft)["timeIn"] == "08:00"


@pytest.mark.parametrize(
    "changes",
    [
        {"student_id": ""},
        {"class_id": ""},
        {"date": ""},
        {"student_id": "abc"},
        {"date": "01/03/2024"},
        {"status": "excused"},
    ],
)
def test_single_payload_rejects_invalid_draft(changes):
    draft = MarkDraft(student_id="1", class_id="2", date="2024-03-01")
    for k, v in changes.items():
        setattr(draft, k, v)

    with pytest.raises(ValidationError):
        build_single_payload(draft)


def test_bulk_payload_derives_times_from_status():
    draft = BulkDraft()
    draft.set_status(7, AttendanceStatus.PRESENT)
    draft.set_status(9, AttendanceStatus.ABSENT)
    draft.set_remarks(9, "sick")

    payload = build_bulk_payload(draft, class_id=3, date="2024-03-01")

    assert payload == {
        "attendanceRecords": [
            {
                "studentId": 7,
                "classId": 3,
                "date": "2024-03-01",
                "status": "present",
                "timeIn": "09:00:00",
                "timeOut": "15:30:00",
                "remarks": "",
            },
            {
                "studentId": 9,
                "classId": 3,
                "date": "2024-03-01",
                "status": "absent",
                "timeIn": None,
                "timeOut": None,
                "remarks": "sick",
            },
        ]
    }


def test_bulk_payload_uses_configured_session_for_late():
    draft = BulkDraft()
    draft.set_status(4, AttendanceStatus.LATE)

    payload = build_bulk_payload(
        draft,
        class_id="3",
        date="2024-03-01",
        session=SessionTimes(time_in="08:00:00", time_out="14:00:00"),
    )

    rec = payload["attendanceRecords"][0]
    assert rec["classId"] == 3
    assert (rec["timeIn"], rec["timeOut"]) == ("08:00:00", "14:00:00")


def test_bulk_entry_created_by_remarks_defaults_to_present():
    draft = BulkDraft()
    draft.set_remarks(5, "left early")

    rec = build_bulk_payload(draft, class_id=3, date="2024-03-01")["attendanceRecords"][0]

    assert rec["status"] == "present"
    assert rec["remarks"] == "left early"


def test_bulk_payload_empty_draft_fails():
    with pytest.raises(ValidationError, match="No attendance records to mark"):
        build_bulk_payload(BulkDraft(), class_id=3, date="2024-03-01")


def test_bulk_payload_requires_class():
    draft = BulkDraft()
    draft.set_status(1, AttendanceStatus.PRESENT)
    with pytest.raises(ValidationError):
        build_bulk_payload(draft, class_id=None, date="2024-03-01")


def test_single_payload_blank_times_become_null():
    draft = MarkDraft(student_id="1", class_id="2", date="2024-03-01", time_in="", time_out="   ")

    payload = build_single_payload(draft)

    assert payload["timeIn"] is None
    assert payload["timeOut"] is None
