from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceMark


@dataclass
class ClassDraft:
    """Present/absent choices for one class, staged before anything is counted."""

    selections: dict[str, AttendanceMark] = field(default_factory=dict)

    def status_of(self, student_id: str) -> AttendanceMark:
        return self.selections.get(student_id, AttendanceMark.ABSENT)

    @property
    def present_count(self) -> int:
        return sum(1 for m in self.selections.values() if m == AttendanceMark.PRESENT)

    @property
    def absent_count(self) -> int:
        return len(self.selections) - self.present_count

    def to_dict(self) -> dict[str, str]:
        return {sid: mark.value for sid, mark in self.selections.items()}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ClassDraft":
        selections: dict[str, AttendanceMark] = {}
        for sid, value in (data or {}).items():
            try:
                selections[str(sid)] = AttendanceMark(value)
            except ValueError:
                selections[str(sid)] = AttendanceMark.ABSENT
        return cls(selections=selections)
