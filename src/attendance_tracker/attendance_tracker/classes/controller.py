from __future__ import annotations

from flask import Flask

from ..common.web import api_action, current_teacher_session, json_ok, load_draft, request_data, request_value, store_draft
from ..container import Container
from .service import ClassWorkflow


def register(app: Flask, container: Container) -> None:
    def _workflow() -> ClassWorkflow:
        return ClassWorkflow(container.roster_service, current_teacher_session(container), draft=load_draft())

    @app.route("/api/class/start", methods=["POST"], endpoint="start_class")
    @api_action
    def start_class():
        data = request_data()
        preselect = str(data.get("preselectAll", "")).lower() in {"1", "true", "yes", "on"}

        workflow = _workflow()
        workflow.start_class(preselect_all=preselect)
        store_draft(workflow.draft)
        return json_ok("Class started.", classDraft=workflow.snapshot())

    @app.route("/api/class/preselect", methods=["POST"], endpoint="preselect_class")
    @api_action
    def preselect_class():
        workflow = _workflow()
        workflow.preselect_all()
        store_draft(workflow.draft)
        return json_ok("All students marked present.", classDraft=workflow.snapshot())

    @app.route("/api/class/toggle", methods=["POST"], endpoint="toggle_class")
    @api_action
    def toggle_class():
        data = request_data()
        workflow = _workflow()
        workflow.toggle(request_value(data, "studentId", "student_id"), request_value(data, "status"))
        store_draft(workflow.draft)
        return json_ok("", classDraft=workflow.snapshot())

    @app.route("/api/class/commit", methods=["POST"], endpoint="commit_class")
    @api_action
    def commit_class():
        workflow = _workflow()
        total = workflow.commit()
        store_draft(None)
        return json_ok("Class attendance saved.", totalClasses=total)

    @app.route("/api/class/cancel", methods=["POST"], endpoint="cancel_class")
    @api_action
    def cancel_class():
        workflow = _workflow()
        workflow.cancel()
        store_draft(None)
        return json_ok("Class cancelled.")
