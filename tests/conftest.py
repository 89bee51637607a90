from __future__ import annotations

from typing import Optional

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord, AttendanceSummary
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import ApiError
from src.class_attendance.class_attendance.roster.model import SchoolClass, Student


class FakeGateway:
    def __init__(self):
        self.calls: list[tuple] = []
        self.records: list[AttendanceRecord] = []
        self.students = [
            Student(id=1, name="An", class_name="5-A", roll_number="01"),
            Student(id=2, name="Binh", class_name="5-A", roll_number="02"),
            Student(id=5, name="Chi", class_name="5-B", roll_number="01"),
        ]
        self.classes = [SchoolClass(id=3, name="5-A"), SchoolClass(id=4, name="5-B")]
        self.fail: dict[str, ApiError] = {}
        self.on_list_records = None

    def _check(self, name: str):
        if name in self.fail:
            raise self.fail[name]

    def list_records(self, *, date: str, class_id: Optional[int] = None):
        self.calls.append(("list_records", date, class_id))
        if self.on_list_records:
            hook, self.on_list_records = self.on_list_records, None
            hook()
        self._check("list_records")
        return [r for r in self.records if r.date == date and (class_id is None or r.class_id == class_id)]

    def get_summary(self, *, date: str, class_id: Optional[int] = None):
        self.calls.append(("get_summary", date, class_id))
        self._check("get_summary")
        n = len(self.list_for(date, class_id))
        return AttendanceSummary(n, n, 0, 0, "100.0" if n else "0", "0")

    def list_for(self, date, class_id):
        return [r for r in self.records if r.date == date and (class_id is None or r.class_id == class_id)]

    def list_students(self):
        self.calls.append(("list_students",))
        self._check("list_students")
        return list(self.students)

    def list_classes(self):
        self.calls.append(("list_classes",))
        self._check("list_classes")
        return list(self.classes)

    def create_record(self, payload: dict) -> dict:
        self.calls.append(("create_record", payload))
        self._check("create_record")
        self._store(payload)
        return {"id": len(self.records)}

    def create_bulk(self, payload: dict) -> dict:
        self.calls.append(("create_bulk", payload))
        self._check("create_bulk")
        for p in payload["attendanceRecords"]:
            self._store(p)
        return {"created": len(payload["attendanceRecords"])}

    def _store(self, p: dict) -> None:
        self.records.append(
            AttendanceRecord(
                id=len(self.records) + 1,
                student_id=p["studentId"],
                student_name="",
                class_id=p["classId"],
                class_name="",
                date=p["date"],
                status=AttendanceStatus(p["status"]),
                time_in=p["timeIn"],
                time_out=p["timeOut"],
                remarks=p["remarks"],
            )
        )

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def gateway():
    return FakeGateway()
