from __future__ import annotations

import logging

from flask import Flask, session

from ..classes.service import ClassWorkflow
from ..common.web import (
    SESSION_ERROR,
    SESSION_TEACHER,
    api_action,
    current_teacher_session,
    json_ok,
    load_draft,
    request_data,
    request_value,
)
from ..container import Container
from ..core.exceptions import AuthorizationError, DomainError, StorageError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @api_action
    def login():
        data = request_data()
        t_session = container.auth_service.login(
            name=request_value(data, "name"),
            subject=request_value(data, "subject"),
            semester=request_value(data, "semester"),
            password=request_value(data, "password"),
        )

        session.clear()
        session[SESSION_TEACHER] = t_session.identity.public_dict()
        return json_ok(
            "Signed in.",
            teacherInfo=t_session.identity.public_dict(),
            totalClasses=t_session.total_classes,
        )

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    @api_action
    def logout():
        try:
            if SESSION_TEACHER in session:
                container.auth_service.logout(current_teacher_session(container))
        except DomainError as e:
            logger.warning("Signing out without a restorable session: %s", e)
        finally:
            session.clear()
        return json_ok("Signed out.")

    @app.route("/api/state", methods=["GET"], endpoint="state")
    def state():
        """Everything the UI renders: teacher, roster with percentages, class counter, last error, draft."""

        error = session.get(SESSION_ERROR)
        if SESSION_TEACHER not in session:
            return {"success": True, "teacherInfo": None, "students": [], "totalClasses": 0, "error": error, "classDraft": None}

        try:
            t_session = current_teacher_session(container)
        except AuthorizationError as e:
            logger.warning("Could not restore teacher session: %s", e)
            session.clear()
            return {"success": False, "message": "Please sign in to continue."}, 401
        except StorageError as e:
            # Keep the cookie and draft; the store may come back.
            logger.error("Store unavailable while restoring session: %s", e)
            return {"success": False, "message": str(e)}, 500

        workflow = ClassWorkflow(container.roster_service, t_session, draft=load_draft())
        rows = container.report_service.summarize(t_session)
        return {
            "success": True,
            "teacherInfo": t_session.identity.public_dict(),
            "students": [r.as_dict() for r in rows],
            "totalClasses": t_session.total_classes,
            "error": error,
            "classDraft": workflow.snapshot() if workflow.draft is not None else None,
        }
