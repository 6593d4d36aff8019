from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TeacherIdentity:
    """Thực thể miền (domain): giáo viên đang đăng nhập.

    Lưu ý: `key` được suy ra từ (name, subject, semester) và không phụ thuộc mật khẩu.
    """

    name: str
    subject: str
    semester: str
    password: str
    key: str

    def public_dict(self) -> dict:
        """Teacher info safe to hand to the UI (no password)."""

        return {
            "name": self.name,
            "subject": self.subject,
            "semester": self.semester,
            "key": self.key,
        }
