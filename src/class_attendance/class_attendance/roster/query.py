from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from .model import SchoolClass, Student


def find_class(classes: Iterable[SchoolClass], class_id) -> Optional[SchoolClass]:
    """Look up a class by id; accepts an int or a numeric string from a form."""
    if class_id is None or class_id == "":
        return None
    try:
        wanted = int(class_id)
    except (TypeError, ValueError):
        return None
    for c in classes:
        if c.id == wanted:
            return c
    return None


def roster_for_class(
    students: Sequence[Student],
    classes: Sequence[SchoolClass],
    selected_class_id,
) -> List[Student]:
    """Students belonging to the selected class.

    Students only carry the class name, so the join is by name. If two classes
    share a name their rosters are indistinguishable here.
    """
    school_class = find_class(classes, selected_class_id)
    if not school_class:
        return []
    return [s for s in students if s.class_name == school_class.name]


def unmarked_students(roster: Sequence[Student], records: Iterable[AttendanceRecord]) -> List[Student]:
    """Roster students with no record among the loaded (already filtered) records."""
    marked = {r.student_id for r in records}
    seen = set()
    out = []
    for s in roster:
        if s.id in marked or s.id in seen:
            continue
        seen.add(s.id)
        out.append(s)
    return out
