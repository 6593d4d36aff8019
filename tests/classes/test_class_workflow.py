from __future__ import annotations

import pytest

from attendance_tracker.classes.model import ClassDraft
from attendance_tracker.classes.service import ClassWorkflow
from attendance_tracker.core.enums import AttendanceMark, WorkflowState
from attendance_tracker.core.exceptions import StorageError, ValidationError, WorkflowError


@pytest.fixture
def three_students(roster, teacher):
    return [
        roster.add_student(teacher, "Ann", "1"),
        roster.add_student(teacher, "Ben", "2"),
        roster.add_student(teacher, "Cat", "3"),
    ]


def _counts(session):
    return {s.name: (s.attendance_count, s.absent_count) for s in session.students}


def test_commit_counts_present_and_absent(roster, teacher, store, three_students):
    ann, ben, cat = three_students
    workflow = ClassWorkflow(roster, teacher)

    workflow.start_class()
    workflow.toggle(ann.student_id, "present")
    workflow.toggle(ben.student_id, AttendanceMark.PRESENT)
    workflow.toggle(cat.student_id, "absent")
    total = workflow.commit()

    assert total == 1
    assert teacher.total_classes == 1
    assert _counts(teacher) == {"Ann": (1, 0), "Ben": (1, 0), "Cat": (0, 1)}
    assert store.get("alice_math_3-totalClasses") == 1
    assert workflow.state == WorkflowState.IDLE
    assert workflow.draft is None


def test_student_without_draft_entry_counts_as_absent(roster, teacher, three_students):
    ann, _, _ = three_students
    workflow = ClassWorkflow(roster, teacher, draft=ClassDraft({ann.student_id: AttendanceMark.PRESENT}))

    workflow.commit()

    assert _counts(teacher) == {"Ann": (1, 0), "Ben": (0, 1), "Cat": (0, 1)}


def test_start_defaults_to_absent_unless_preselected(roster, teacher, three_students):
    workflow = ClassWorkflow(roster, teacher)
    draft = workflow.start_class()
    assert draft.present_count == 0
    assert draft.absent_count == 3
    workflow.cancel()

    draft = workflow.start_class(preselect_all=True)
    assert draft.present_count == 3


def test_preselect_all_while_drafting(roster, teacher, three_students):
    ann, _, _ = three_students
    workflow = ClassWorkflow(roster, teacher)
    workflow.start_class()

    workflow.preselect_all()
    workflow.toggle(ann.student_id, "absent")

    assert workflow.snapshot()["presentCount"] == 2
    assert workflow.snapshot()["state"] == "drafting"


def test_cancel_leaves_counters_untouched(roster, teacher, store, three_students):
    ann, ben, _ = three_students
    before = _counts(teacher)
    workflow = ClassWorkflow(roster, teacher)

    workflow.start_class()
    workflow.toggle(ann.student_id, "present")
    workflow.toggle(ben.student_id, "present")
    workflow.cancel()

    assert _counts(teacher) == before
    assert teacher.total_classes == 0
    assert store.get("alice_math_3-totalClasses") == 0
    assert workflow.state == WorkflowState.IDLE


def test_steps_outside_drafting_are_rejected(roster, teacher, three_students):
    workflow = ClassWorkflow(roster, teacher)

    for step in (workflow.commit, workflow.cancel, workflow.preselect_all):
        with pytest.raises(WorkflowError):
            step()
    with pytest.raises(WorkflowError):
        workflow.toggle(three_students[0].student_id, "present")

    workflow.start_class()
    with pytest.raises(WorkflowError):
        workflow.start_class()


def test_toggle_validates_status_and_student(roster, teacher, three_students):
    workflow = ClassWorkflow(roster, teacher)
    workflow.start_class()

    with pytest.raises(ValidationError):
        workflow.toggle(three_students[0].student_id, "late")
    with pytest.raises(ValidationError):
        workflow.toggle("missing", "present")


def test_failed_commit_keeps_draft_and_counters(roster, teacher, store, three_students):
    workflow = ClassWorkflow(roster, teacher)
    workflow.start_class(preselect_all=True)
    store.fail_writes = True

    with pytest.raises(StorageError):
        workflow.commit()

    assert workflow.state == WorkflowState.DRAFTING
    assert teacher.total_classes == 0
    assert _counts(teacher) == {"Ann": (0, 0), "Ben": (0, 0), "Cat": (0, 0)}


def test_draft_round_trips_through_plain_dict():
    draft = ClassDraft.from_dict({"1": "present", "2": "absent", "3": "bogus"})

    assert draft.status_of("1") == AttendanceMark.PRESENT
    assert draft.status_of("3") == AttendanceMark.ABSENT
    assert draft.status_of("unknown") == AttendanceMark.ABSENT
    assert draft.to_dict() == {"1": "present", "2": "absent", "3": "absent"}
