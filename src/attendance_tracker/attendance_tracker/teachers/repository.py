from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..core.constants import TEACHERS_KEY
from ..storage.repository import KeyValueStore

logger = logging.getLogger(__name__)


class CredentialRepository(Protocol):
    """Giao diện repository cho bảng tài khoản giáo viên (key -> password)."""

    def get_password(self, teacher_key: str) -> Optional[str]:
        raise NotImplementedError

    def register(self, teacher_key: str, password: str) -> None:
        raise NotImplementedError


class KeyValueCredentialRepository(CredentialRepository):
    """Credentials live in one `teachers` entry: {derived_key: {"password": ...}}."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load_all(self) -> dict:
        teachers = self._store.get(TEACHERS_KEY)
        if teachers is None:
            return {}
        if not isinstance(teachers, dict):
            logger.warning("Ignoring malformed %r entry (%s)", TEACHERS_KEY, type(teachers).__name__)
            return {}
        return teachers

    def get_password(self, teacher_key: str) -> Optional[str]:
        entry = self._load_all().get(teacher_key)
        if not isinstance(entry, dict):
            return None
        password = entry.get("password")
        return password if isinstance(password, str) else None

    def register(self, teacher_key: str, password: str) -> None:
        teachers = self._load_all()
        teachers[teacher_key] = {"password": password}
        self._store.set(TEACHERS_KEY, teachers)
