from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import timestamp_millis
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..teachers.session import TeacherSession
from .model import Student
from .repository import RosterRepository

logger = logging.getLogger(__name__)


def new_student_id(existing_ids: Iterable[str], *, clock: Callable[[], int] = timestamp_millis) -> str:
    """Millisecond timestamp, bumped until it is unused in the roster."""

    taken = set(existing_ids)
    candidate = clock()
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


class RosterService:
    """Use case: maintain the roster and attendance counters of the signed-in teacher."""

    def __init__(self, rosters: RosterRepository, *, clock: Optional[Callable[[], int]] = None):
        self._rosters = rosters
        self._clock = clock or timestamp_millis

    def save_state(self, session: TeacherSession, students: Sequence[Student], total_classes: int) -> None:
        """Persist first, then swap the in-memory state.

        A StorageError from the repository propagates and leaves the session untouched.
        """

        identity = session.require_active()
        self._rosters.save(identity.key, students, total_classes)
        session.replace_state(students, total_classes)

    def list_students(self, session: TeacherSession) -> list[Student]:
        session.require_active()
        return list(session.students)

    def add_student(self, session: TeacherSession, name: str, roll_no: str) -> Student:
        identity = session.require_active()
        if not (name or "").strip() or not (roll_no or "").strip():
            raise ValidationError("Student name and roll number are required.")
        name = require_non_empty(name, "Student name")
        roll_no = require_non_empty(roll_no, "Roll number")

        if any(s.roll_no_normalized == roll_no.lower() for s in session.students if s.teacher_key == identity.key):
            raise ValidationError("Student with this roll number already exists.")

        student = Student(
            student_id=new_student_id((s.student_id for s in session.students), clock=self._clock),
            name=name,
            roll_no=roll_no,
            attendance_count=0,
            absent_count=0,
            teacher_key=identity.key,
        )
        self.save_state(session, [*session.students, student], session.total_classes)
        logger.debug("Added student %s (%s) for %s", student.student_id, roll_no, identity.key)
        return student

    def mark_present(self, session: TeacherSession, student_id: str) -> None:
        self._update_one(session, student_id, Student.with_present)

    def mark_absent(self, session: TeacherSession, student_id: str) -> None:
        self._update_one(session, student_id, Student.with_absent)

    def _update_one(self, session: TeacherSession, student_id: str, change: Callable[[Student], Student]) -> None:
        session.require_active()
        if session.find_student(student_id) is None:
            return
        updated = [change(s) if s.student_id == student_id else s for s in session.students]
        self.save_state(session, updated, session.total_classes)

    def delete_student(self, session: TeacherSession, student_id: str) -> None:
        session.require_active()
        updated = [s for s in session.students if s.student_id != student_id]
        self.save_state(session, updated, session.total_classes)

    def end_semester(self, session: TeacherSession) -> None:
        identity = session.require_active()
        self.save_state(session, [s.with_counts_reset() for s in session.students], 0)
        logger.info("Semester reset for %s (%d students kept)", identity.key, len(session.students))
