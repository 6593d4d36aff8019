from __future__ import annotations

from flask import Flask

from ..common.web import api_action, current_teacher_session, json_ok, request_data, request_value
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @api_action
    def add_student():
        data = request_data()
        t_session = current_teacher_session(container)
        student = container.roster_service.add_student(
            t_session,
            request_value(data, "name"),
            request_value(data, "rollNo", "roll_no"),
        )
        return json_ok("Student added.", studentId=student.student_id)

    @app.route("/api/students/<student_id>/present", methods=["POST"], endpoint="mark_present")
    @api_action
    def mark_present(student_id: str):
        container.roster_service.mark_present(current_teacher_session(container), student_id)
        return json_ok("Marked present.")

    @app.route("/api/students/<student_id>/absent", methods=["POST"], endpoint="mark_absent")
    @api_action
    def mark_absent(student_id: str):
        container.roster_service.mark_absent(current_teacher_session(container), student_id)
        return json_ok("Marked absent.")

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @api_action
    def delete_student(student_id: str):
        container.roster_service.delete_student(current_teacher_session(container), student_id)
        return json_ok("Student deleted.")

    @app.route("/api/semester/end", methods=["POST"], endpoint="end_semester")
    @api_action
    def end_semester():
        container.roster_service.end_semester(current_teacher_session(container))
        return json_ok("Semester data reset.")
