from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import read_json_body, rows_to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return jsonify(rows_to_json(container.attendance_service.list_attendance()))

    @app.route("/attendance", methods=["POST"], endpoint="add_attendance")
    def add_attendance():
        body = read_json_body()
        attendance_id = container.attendance_service.record_attendance(
            employee_id=body.get("employee_id"),
            work_date=body.get("date"),
            check_in=body.get("check_in"),
            check_out=body.get("check_out"),
            status=body.get("status"),
        )
        return jsonify({"message": "Attendance added", "id": attendance_id})
