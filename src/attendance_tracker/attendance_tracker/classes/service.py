from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import AttendanceMark, WorkflowState
from ..core.exceptions import ValidationError, WorkflowError
from ..students.service import RosterService
from ..teachers.session import TeacherSession
from .model import ClassDraft

logger = logging.getLogger(__name__)


class ClassWorkflow:
    """Idle -> Drafting -> Idle state machine for taking one class.

    Nothing is persisted until commit(); cancel() drops the draft.
    """

    def __init__(self, roster: RosterService, session: TeacherSession, *, draft: Optional[ClassDraft] = None):
        self._roster = roster
        self._session = session
        self._draft = draft

    @property
    def state(self) -> WorkflowState:
        return WorkflowState.IDLE if self._draft is None else WorkflowState.DRAFTING

    @property
    def draft(self) -> Optional[ClassDraft]:
        return self._draft

    def snapshot(self) -> dict:
        draft = self._draft
        return {
            "state": self.state.value,
            "selections": draft.to_dict() if draft else {},
            "presentCount": draft.present_count if draft else 0,
            "absentCount": draft.absent_count if draft else 0,
        }

    def _require_drafting(self) -> ClassDraft:
        if self._draft is None:
            raise WorkflowError("No class is in progress.")
        return self._draft

    def start_class(self, *, preselect_all: bool = False) -> ClassDraft:
        self._session.require_active()
        if self._draft is not None:
            raise WorkflowError("A class is already in progress.")

        default = AttendanceMark.PRESENT if preselect_all else AttendanceMark.ABSENT
        self._draft = ClassDraft({s.student_id: default for s in self._session.students})
        return self._draft

    def preselect_all(self) -> None:
        draft = self._require_drafting()
        for s in self._session.students:
            draft.selections[s.student_id] = AttendanceMark.PRESENT

    def toggle(self, student_id: str, status: AttendanceMark | str) -> None:
        draft = self._require_drafting()
        try:
            mark = AttendanceMark(status)
        except ValueError:
            raise ValidationError("Status must be 'present' or 'absent'.")

        if self._session.find_student(student_id) is None:
            raise ValidationError("Student does not exist.")
        draft.selections[student_id] = mark

    def commit(self) -> int:
        """Count the class for every student on the roster; returns the new class total."""

        draft = self._require_drafting()
        identity = self._session.require_active()

        updated = []
        present = 0
        for s in self._session.students:
            if draft.status_of(s.student_id) == AttendanceMark.PRESENT:
                updated.append(s.with_present())
                present += 1
            else:
                updated.append(s.with_absent())

        total = self._session.total_classes + 1
        self._roster.save_state(self._session, updated, total)
        self._draft = None

        logger.info("Class %d recorded for %s (%d present, %d absent)", total, identity.key, present, len(updated) - present)
        return total

    def cancel(self) -> None:
        self._require_drafting()
        self._draft = None
