from __future__ import annotations

import pytest

from attendance_tracker.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from attendance_tracker.teachers.service import AuthService


def test_first_login_registers_plaintext_password(auth, store):
    session = auth.login(name=" Alice ", subject="Math", semester="3", password="secret1")

    assert session.is_authenticated
    assert session.identity.key == "alice_math_3"
    assert session.identity.name == "Alice"
    assert session.students == []
    assert session.total_classes == 0
    assert store.get("teachers") == {"alice_math_3": {"password": "secret1"}}


def test_login_again_with_same_credentials(auth):
    auth.login(name="Alice", subject="Math", semester="3", password="secret1")
    again = auth.login(name="alice", subject="math", semester="3", password="secret1")

    assert again.is_authenticated
    assert again.identity.key == "alice_math_3"


def test_wrong_password_fails_and_leaves_credentials_unchanged(auth, store):
    auth.login(name="Alice", subject="Math", semester="3", password="secret1")
    before = store.get("teachers")

    with pytest.raises(AuthenticationError):
        auth.login(name="Alice", subject="Math", semester="3", password="wrong-one")

    assert store.get("teachers") == before


def test_same_teacher_other_semester_is_a_new_identity(auth, store):
    auth.login(name="Alice", subject="Math", semester="3", password="secret1")
    other = auth.login(name="Alice", subject="Math", semester="4", password="another1")

    assert other.identity.key == "alice_math_4"
    assert set(store.get("teachers")) == {"alice_math_3", "alice_math_4"}


@pytest.mark.parametrize(
    "fields,message",
    [
        ({"name": "", "subject": "Math", "semester": "3", "password": "secret1"}, "Please fill in all fields."),
        ({"name": "Alice", "subject": "Math", "semester": "three", "password": "secret1"}, "Semester must be a number."),
        ({"name": "Alice", "subject": "Math 101", "semester": "3", "password": "secret1"}, "Subject must contain only letters."),
        ({"name": "Alice", "subject": "Math", "semester": "3", "password": "abc"}, "Password should be at least 6 characters."),
    ],
)
def test_login_validation(auth, store, fields, message):
    with pytest.raises(ValidationError) as exc:
        auth.login(**fields)

    assert str(exc.value) == message
    assert store.get("teachers") is None


def test_min_password_length_is_configurable(store):
    from attendance_tracker.students.repository import KeyValueRosterRepository
    from attendance_tracker.teachers.repository import KeyValueCredentialRepository

    auth = AuthService(KeyValueCredentialRepository(store), KeyValueRosterRepository(store), min_password_length=4)
    session = auth.login(name="Bob", subject="Art", semester="1", password="abcd")

    assert session.is_authenticated


def test_logout_is_not_destructive(auth, roster, teacher):
    roster.add_student(teacher, "Bob", "102")

    auth.logout(teacher)

    assert not teacher.is_authenticated
    assert teacher.identity is None
    assert teacher.students == []
    assert teacher.total_classes == 0

    restored = auth.login(name="Alice", subject="Math", semester="3", password="secret1")
    assert [s.name for s in restored.students] == ["Bob"]


def test_resume_reloads_roster_without_password(auth, roster, teacher):
    roster.add_student(teacher, "Bob", "102")

    resumed = auth.resume(name="Alice", subject="Math", semester="3")

    assert resumed.is_authenticated
    assert [s.roll_no for s in resumed.students] == ["102"]


def test_resume_unknown_teacher_requires_sign_in(auth):
    with pytest.raises(AuthorizationError):
        auth.resume(name="Nobody", subject="Math", semester="1")
    with pytest.raises(AuthorizationError):
        auth.resume(name="", subject="Math", semester="1")
