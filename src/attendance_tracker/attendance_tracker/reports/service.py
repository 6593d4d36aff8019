from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Optional

from ..core.constants import CSV_HEADER, NOT_AVAILABLE
from ..teachers.session import TeacherSession


def attendance_percentage(attendance_count: int, total_classes: int) -> Optional[float]:
    if total_classes <= 0:
        return None
    return round(attendance_count / total_classes * 100, 2)


@dataclass(frozen=True)
class ReportRow:
    student_id: str
    name: str
    roll_no: str
    attendance: int
    absents: int
    percentage: Optional[float]

    def as_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "rollNo": self.roll_no,
            "attendanceCount": self.attendance,
            "absentCount": self.absents,
            "percentage": self.percentage,
        }


class AttendanceReportService:
    def summarize(self, session: TeacherSession) -> list[ReportRow]:
        session.require_active()
        return [
            ReportRow(
                student_id=s.student_id,
                name=s.name,
                roll_no=s.roll_no,
                attendance=s.attendance_count,
                absents=s.absent_count,
                percentage=attendance_percentage(s.attendance_count, session.total_classes),
            )
            for s in session.students
        ]

    def export_csv(self, session: TeacherSession) -> str:
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for r in self.summarize(session):
            pct = f"{r.percentage:.2f}" if r.percentage is not None else NOT_AVAILABLE
            writer.writerow([r.name, r.roll_no, r.attendance, r.absents, pct])
        return out.getvalue()

    def export_filename(self, session: TeacherSession) -> str:
        identity = session.require_active()
        return f"{identity.key}_attendance.csv"
