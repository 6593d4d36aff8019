from __future__ import annotations

from typing import Optional

from ..core.constants import STUDENTS_SUFFIX, TOTAL_CLASSES_SUFFIX, UNKNOWN_TEACHER_KEY
from ..core.exceptions import ValidationError


def derive_key(name: Optional[str], subject: Optional[str], semester: Optional[str]) -> str:
    """Namespace key for one (name, subject, semester) triple.

    Missing fields give UNKNOWN_TEACHER_KEY; callers that read or write data
    must pass the result through require_teacher_key().
    """

    parts = [(p or "").strip() for p in (name, subject, semester)]
    if not all(parts):
        return UNKNOWN_TEACHER_KEY
    return "_".join(parts).lower()


def require_teacher_key(key: Optional[str]) -> str:
    if not key or key == UNKNOWN_TEACHER_KEY:
        raise ValidationError("Teacher name, subject and semester are required.")
    return key


def students_key(teacher_key: str) -> str:
    return f"{require_teacher_key(teacher_key)}{STUDENTS_SUFFIX}"


def total_classes_key(teacher_key: str) -> str:
    return f"{require_teacher_key(teacher_key)}{TOTAL_CLASSES_SUFFIX}"
