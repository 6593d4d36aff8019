from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.constants import DEFAULT_MIN_PASSWORD_LENGTH
from .core.enums import StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceReportService
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .students.repository import KeyValueRosterRepository
from .students.service import RosterService
from .teachers.repository import KeyValueCredentialRepository
from .teachers.service import AuthService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    credentials_repo: KeyValueCredentialRepository
    roster_repo: KeyValueRosterRepository

    auth_service: AuthService
    roster_service: RosterService
    report_service: AttendanceReportService


def build_store(
    backend: str | StorageBackend,
    *,
    storage_path: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
) -> KeyValueStore:
    try:
        backend = StorageBackend(backend)
    except ValueError:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if backend == StorageBackend.JSON:
        if not storage_path:
            raise ValueError("STORAGE_PATH is required for the json storage backend")
        return JsonFileKeyValueStore(storage_path)

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
    return MySQLKeyValueStore(conn)


def build_container(
    *,
    store: KeyValueStore,
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> Container:
    credentials_repo = KeyValueCredentialRepository(store)
    roster_repo = KeyValueRosterRepository(store)

    auth_service = AuthService(credentials_repo, roster_repo, min_password_length=min_password_length)
    roster_service = RosterService(roster_repo)
    report_service = AttendanceReportService()

    return Container(
        store=store,
        credentials_repo=credentials_repo,
        roster_repo=roster_repo,
        auth_service=auth_service,
        roster_service=roster_service,
        report_service=report_service,
    )
