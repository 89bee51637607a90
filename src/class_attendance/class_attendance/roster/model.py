from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: the API stores only the class *name* on a student, not its id.
    """

    id: int
    name: str
    class_name: str
    roll_number: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Student":
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            class_name=str(data.get("class") or ""),
            roll_number=str(data.get("rollNumber") or ""),
        )


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: Class (grade + division)."""

    id: int
    name: str
    grade: str = ""
    division: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "SchoolClass":
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            grade=str(data.get("grade") or ""),
            division=str(data.get("division") or ""),
        )
