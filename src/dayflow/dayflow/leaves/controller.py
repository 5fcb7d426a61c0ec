from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import read_json_body, rows_to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        return jsonify(rows_to_json(container.leave_service.list_leaves()))

    @app.route("/leaves", methods=["POST"], endpoint="add_leave")
    def add_leave():
        body = read_json_body()
        leave_id = container.leave_service.request_leave(
            employee_id=body.get("employee_id"),
            leave_type=body.get("leave_type"),
            start_date=body.get("start_date"),
            end_date=body.get("end_date"),
            status=body.get("status"),
        )
        return jsonify({"message": "Leave added", "id": leave_id})
