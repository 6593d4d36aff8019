from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Sinh viên trong danh sách lớp của một giáo viên."""

    student_id: str
    name: str
    roll_no: str
    attendance_count: int
    absent_count: int
    teacher_key: str

    @property
    def roll_no_normalized(self) -> str:
        return self.roll_no.strip().lower()

    def with_present(self) -> "Student":
        return replace(self, attendance_count=self.attendance_count + 1)

    def with_absent(self) -> "Student":
        return replace(self, absent_count=self.absent_count + 1)

    def with_counts_reset(self) -> "Student":
        return replace(self, attendance_count=0, absent_count=0)


@dataclass(frozen=True)
class RosterSnapshot:
    """What is persisted per teacher: ordered students plus the class counter."""

    students: tuple[Student, ...]
    total_classes: int
