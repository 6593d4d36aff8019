from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Trạng thái điểm danh của một sinh viên trong một buổi học."""

    PRESENT = "present"
    ABSENT = "absent"


class WorkflowState(str, Enum):
    IDLE = "idle"
    DRAFTING = "drafting"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    JSON = "json"
    MYSQL = "mysql"
