from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.roster.model import SchoolClass, Student
from src.class_attendance.class_attendance.roster.query import find_class, roster_for_class, unmarked_students

CLASSES = [
    SchoolClass(id=3, name="5-A", grade="5", division="A"),
    SchoolClass(id=4, name="5-B", grade="5", division="B"),
]
STUDENTS = [
    Student(id=1, name="An", class_name="5-A", roll_number="01"),
    Student(id=2, name="Binh", class_name="5-A", roll_number="02"),
    Student(id=5, name="Chi", class_name="5-B", roll_number="01"),
    Student(id=6, name="Dung", class_name="5-A", roll_number="03"),
]


def _record(student_id: int) -> AttendanceRecord:
    return AttendanceRecord(
        id=100 + student_id,
        student_id=student_id,
        student_name="x",
        class_id=3,
        class_name="5-A",
        date="2024-03-01",
        status=AttendanceStatus.PRESENT,
    )


def test_find_class_accepts_numeric_string():
    assert find_class(CLASSES, "4").name == "5-B"
    assert find_class(CLASSES, 4).name == "5-B"
    assert find_class(CLASSES, "abc") is None
    assert find_class(CLASSES, "") is None
    assert find_class(CLASSES, None) is None


def test_roster_joins_by_class_name_in_student_order():
    roster = roster_for_class(STUDENTS, CLASSES, 3)
    assert [s.id for s in roster] == [1, 2, 6]


def test_roster_empty_without_selected_class():
    assert roster_for_class(STUDENTS, CLASSES, None) == []
    assert roster_for_class(STUDENTS, CLASSES, "") == []


def test_roster_empty_when_class_id_unknown():
    assert roster_for_class(STUDENTS, CLASSES, 99) == []


def test_unmarked_excludes_students_with_records():
    roster = [STUDENTS[0], STUDENTS[1]]
    out = unmarked_students(roster, [_record(1)])
    assert [s.id for s in out] == [2]


def test_unmarked_preserves_order_and_drops_duplicates():
    roster = [STUDENTS[3], STUDENTS[1], STUDENTS[3], STUDENTS[0]]
    out = unmarked_students(roster, [])
    assert [s.id for s in out] == [6, 2, 1]


def test_unmarked_is_idempotent():
    roster = roster_for_class(STUDENTS, CLASSES, 3)
    records = [_record(2)]
    once = unmarked_students(roster, records)
    assert unmarked_students(once, records) == once


def test_no_class_selected_gives_empty_unmarked():
    roster = roster_for_class(STUDENTS, CLASSES, None)
    assert unmarked_students(roster, [_record(1)]) == []
