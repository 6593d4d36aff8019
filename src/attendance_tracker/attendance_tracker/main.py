from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .classes.controller import register as register_classes
from .common.logging_utils import configure_logging
from .config import get_settings_module
from .container import Container, build_container, build_store
from .core.constants import DEFAULT_MIN_PASSWORD_LENGTH
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", StorageBackend.JSON.value)
        db_config = getattr(settings, "DB_CONFIG", {})
        store = build_store(backend, storage_path=getattr(settings, "STORAGE_PATH", None), db_config=db_config)

        if StorageBackend(backend) == StorageBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = store.connection
            apply_schema(conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container(
            store=store,
            min_password_length=int(getattr(settings, "MIN_PASSWORD_LENGTH", DEFAULT_MIN_PASSWORD_LENGTH)),
        )

    logger.info("settings=%s backend=%s", settings_module, type(container.store).__name__)

    app.extensions["attendance_container"] = container

    register_teachers(app, container)
    register_students(app, container)
    register_classes(app, container)
    register_reports(app, container)

    return app
