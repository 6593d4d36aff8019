from __future__ import annotations

import logging

from ..common.validators import require_digits, require_letters, require_min_length, require_non_empty
from ..core.constants import DEFAULT_MIN_PASSWORD_LENGTH, UNKNOWN_TEACHER_KEY
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..students.repository import RosterRepository
from .keys import derive_key, require_teacher_key
from .model import TeacherIdentity
from .repository import CredentialRepository
from .session import TeacherSession

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: teacher login (first login registers), logout and session resume."""

    def __init__(
        self,
        credentials: CredentialRepository,
        rosters: RosterRepository,
        *,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
    ):
        self._credentials = credentials
        self._rosters = rosters
        self._min_password_length = int(min_password_length)

    def _validate(self, *, name: str, subject: str, semester: str, password: str) -> tuple[str, str, str, str]:
        if not all(v and v.strip() for v in (name, subject, semester, password)):
            raise ValidationError("Please fill in all fields.")

        name = require_non_empty(name, "Name")
        subject = require_letters(require_non_empty(subject, "Subject"), "Subject")
        semester = require_digits(require_non_empty(semester, "Semester"), "Semester")
        password = require_min_length(password.strip(), "Password", self._min_password_length)
        return name, subject, semester, password

    def login(self, *, name: str, subject: str, semester: str, password: str) -> TeacherSession:
        name, subject, semester, password = self._validate(
            name=name, subject=subject, semester=semester, password=password
        )
        key = require_teacher_key(derive_key(name, subject, semester))

        stored = self._credentials.get_password(key)
        if stored is None:
            self._credentials.register(key, password)
            logger.info("Registered new teacher %s", key)
        elif stored != password:
            logger.warning("Rejected login for %s: invalid password", key)
            raise AuthenticationError("Invalid password!")
        else:
            logger.info("Teacher %s signed in", key)

        identity = TeacherIdentity(name=name, subject=subject, semester=semester, password=password, key=key)
        return self._open_session(identity)

    def resume(self, *, name: str, subject: str, semester: str) -> TeacherSession:
        """Rebuild the session of a teacher who already signed in.

        Used by the web layer, whose signed cookie keeps the identity but not the password.
        """

        key = derive_key(name, subject, semester)
        if key == UNKNOWN_TEACHER_KEY:
            raise AuthorizationError("Please sign in to continue.")

        stored = self._credentials.get_password(key)
        if stored is None:
            raise AuthorizationError("Please sign in to continue.")

        identity = TeacherIdentity(
            name=name.strip(), subject=subject.strip(), semester=semester.strip(), password=stored, key=key
        )
        return self._open_session(identity)

    def logout(self, session: TeacherSession) -> None:
        # Persisted roster and counters stay; signing in again restores them.
        if session.identity is not None:
            logger.info("Teacher %s signed out", session.identity.key)
        session.clear()

    def _open_session(self, identity: TeacherIdentity) -> TeacherSession:
        snapshot = self._rosters.load(identity.key)
        return TeacherSession(
            identity=identity,
            students=list(snapshot.students),
            total_classes=snapshot.total_classes,
            is_authenticated=True,
        )
