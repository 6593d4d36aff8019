from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.web import api_action, current_teacher_session
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/report.csv", methods=["GET"], endpoint="report_csv")
    @api_action
    def report_csv():
        t_session = current_teacher_session(container)
        csv_text = container.report_service.export_csv(t_session)
        filename = container.report_service.export_filename(t_session)

        buf = io.BytesIO(csv_text.encode("utf-8-sig"))
        return send_file(buf, mimetype="text/csv", as_attachment=True, download_name=filename)
