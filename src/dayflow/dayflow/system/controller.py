from __future__ import annotations

import mysql.connector
from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "Dayflow Backend Running"

    @app.route("/test-db", methods=["GET"], endpoint="test_db")
    def test_db():
        try:
            now = container.health_repo.current_time()
        except mysql.connector.Error:
            app.logger.exception("Database connectivity check failed")
            return jsonify({"error": "Database connection failed"}), 500
        return jsonify({"message": "Database connected!", "time": now})
