"""Helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..classes.model import ClassDraft
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from ..teachers.session import TeacherSession

logger = logging.getLogger(__name__)

SESSION_TEACHER = "teacher"
SESSION_DRAFT = "class_draft"
SESSION_ERROR = "error"


def json_ok(message: str = "", **payload):
    session.pop(SESSION_ERROR, None)
    return jsonify({"success": True, "message": message, **payload}), 200


def json_error(message: str, status: int = 400):
    session[SESSION_ERROR] = message
    return jsonify({"success": False, "message": message}), status


def current_teacher_session(container) -> TeacherSession:
    info = session.get(SESSION_TEACHER)
    if not info:
        raise AuthorizationError("Please sign in to continue.")
    return container.auth_service.resume(
        name=info.get("name", ""),
        subject=info.get("subject", ""),
        semester=info.get("semester", ""),
    )


def load_draft() -> ClassDraft | None:
    data = session.get(SESSION_DRAFT)
    return ClassDraft.from_dict(data) if data is not None else None


def store_draft(draft: ClassDraft | None) -> None:
    if draft is None:
        session.pop(SESSION_DRAFT, None)
    else:
        session[SESSION_DRAFT] = draft.to_dict()


def api_action(view):
    """Turn domain errors into JSON messages; unexpected errors are logged and hidden."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except (AuthenticationError, AuthorizationError) as e:
            return json_error(str(e), 401)
        except DomainError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Unexpected error in %s", view.__name__)
            return json_error("Something went wrong. Please try again.", 500)

    return wrapper


def request_value(data: dict, *names: str) -> str:
    for name in names:
        value = data.get(name)
        if value is not None:
            return str(value)
    return ""


def request_data() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
