from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.exceptions import AuthorizationError
from ..students.model import Student
from .model import TeacherIdentity


@dataclass
class TeacherSession:
    """State of the signed-in teacher: identity, roster and class counter.

    Built by AuthService.login()/resume() and handed to every roster and
    class operation; nothing about the active teacher is kept globally.
    """

    identity: Optional[TeacherIdentity] = None
    students: list[Student] = field(default_factory=list)
    total_classes: int = 0
    is_authenticated: bool = False

    @property
    def teacher_key(self) -> Optional[str]:
        return self.identity.key if self.identity else None

    def require_active(self) -> TeacherIdentity:
        if not self.is_authenticated or self.identity is None:
            raise AuthorizationError("Please sign in to continue.")
        return self.identity

    def find_student(self, student_id: str) -> Optional[Student]:
        for s in self.students:
            if s.student_id == student_id:
                return s
        return None

    def replace_state(self, students: Sequence[Student], total_classes: int) -> None:
        self.students = list(students)
        self.total_classes = int(total_classes)

    def clear(self) -> None:
        self.identity = None
        self.students = []
        self.total_classes = 0
        self.is_authenticated = False
