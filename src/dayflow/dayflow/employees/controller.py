from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import read_json_body, rows_to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify(rows_to_json(container.employee_service.list_employees()))

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        body = read_json_body()
        employee_id = container.employee_service.create_employee(
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
            position=body.get("position"),
            department=body.get("department"),
            date_of_joining=body.get("date_of_joining"),
        )
        return jsonify({"message": "Employee added", "id": employee_id})

    @app.route("/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        body = read_json_body()
        affected = container.employee_service.update_employee(
            employee_id,
            name=body.get("name"),
            email=body.get("email"),
            position=body.get("position"),
            department=body.get("department"),
        )
        if not affected:
            app.logger.warning("PUT /employees/%s matched no row", employee_id)
        return jsonify({"message": "Employee updated"})

    @app.route("/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        if not container.employee_service.delete_employee(employee_id):
            app.logger.warning("DELETE /employees/%s matched no row", employee_id)
        return jsonify({"message": "Employee deleted"})
