"""Seed a demo teacher with a small roster into the configured store."""

from __future__ import annotations

import importlib

from attendance_tracker.common.logging_utils import configure_logging
from attendance_tracker.config import get_settings_module
from attendance_tracker.container import build_container, build_store
from attendance_tracker.core.exceptions import ValidationError

DEMO_TEACHER = {"name": "Demo Teacher", "subject": "Math", "semester": "1", "password": "demo123"}
DEMO_STUDENTS = [("Alice Nguyen", "101"), ("Bob Tran", "102"), ("Chi Le", "103")]


def main() -> None:
    configure_logging()
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings.STORAGE_BACKEND, storage_path=settings.STORAGE_PATH, db_config=settings.DB_CONFIG)
    container = build_container(store=store, min_password_length=settings.MIN_PASSWORD_LENGTH)

    session = container.auth_service.login(**DEMO_TEACHER)
    for name, roll_no in DEMO_STUDENTS:
        try:
            container.roster_service.add_student(session, name, roll_no)
        except ValidationError:
            # Already seeded.
            continue

    print(f"OK: Seeded {session.identity.key} ({len(session.students)} students)")


if __name__ == "__main__":
    main()
