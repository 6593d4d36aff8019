from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Sequence

from ..storage.repository import KeyValueStore
from ..teachers.keys import require_teacher_key, students_key, total_classes_key
from .model import RosterSnapshot, Student

logger = logging.getLogger(__name__)


class RosterRepository(Protocol):
    def load(self, teacher_key: str) -> RosterSnapshot:
        raise NotImplementedError

    def save(self, teacher_key: str, students: Sequence[Student], total_classes: int) -> None:
        """Persist the whole roster and the class counter together."""

        raise NotImplementedError


def _as_count(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def _to_student(row: Any, teacher_key: str) -> Optional[Student]:
    if not isinstance(row, dict) or row.get("id") in (None, ""):
        return None
    return Student(
        student_id=str(row["id"]),
        name=str(row.get("name", "")),
        roll_no=str(row.get("rollNo", "")),
        attendance_count=_as_count(row.get("attendanceCount")),
        absent_count=_as_count(row.get("absentCount")),
        teacher_key=str(row.get("teacherKey") or teacher_key),
    )


def _to_record(s: Student) -> dict:
    return {
        "id": s.student_id,
        "name": s.name,
        "rollNo": s.roll_no,
        "attendanceCount": s.attendance_count,
        "absentCount": s.absent_count,
        "teacherKey": s.teacher_key,
    }


class KeyValueRosterRepository(RosterRepository):
    """Roster under `<key>-students`, counter under `<key>-totalClasses`."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self, teacher_key: str) -> RosterSnapshot:
        teacher_key = require_teacher_key(teacher_key)

        rows = self._store.get(students_key(teacher_key))
        if rows is None:
            rows = []
        elif not isinstance(rows, list):
            logger.warning("Ignoring malformed roster for %s", teacher_key)
            rows = []

        students: list[Student] = []
        for row in rows:
            s = _to_student(row, teacher_key)
            if s is None:
                logger.warning("Skipping malformed student record for %s: %r", teacher_key, row)
                continue
            students.append(s)

        total = _as_count(self._store.get(total_classes_key(teacher_key)))
        return RosterSnapshot(students=tuple(students), total_classes=total)

    def save(self, teacher_key: str, students: Sequence[Student], total_classes: int) -> None:
        teacher_key = require_teacher_key(teacher_key)
        self._store.set_many(
            {
                students_key(teacher_key): [_to_record(s) for s in students],
                total_classes_key(teacher_key): int(total_classes),
            }
        )
