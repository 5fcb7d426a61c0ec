from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import read_json_body, rows_to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/payroll", methods=["GET"], endpoint="list_payroll")
    def list_payroll():
        return jsonify(rows_to_json(container.payroll_service.list_payroll()))

    @app.route("/payroll", methods=["POST"], endpoint="add_payroll")
    def add_payroll():
        body = read_json_body()
        payroll_id = container.payroll_service.add_payroll(
            employee_id=body.get("employee_id"),
            basic_salary=body.get("basic_salary"),
            deductions=body.get("deductions"),
            net_salary=body.get("net_salary"),
            pay_date=body.get("pay_date"),
        )
        return jsonify({"message": "Payroll added", "id": payroll_id})
