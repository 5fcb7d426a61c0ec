from __future__ import annotations

import mysql.connector
from flask import Flask, jsonify

from ..core.exceptions import ValidationError


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(mysql.connector.Error)
    def handle_database_error(e: mysql.connector.Error):
        # The driver message goes back to the caller unchanged.
        app.logger.exception("Database error")
        return jsonify({"error": str(e) or e.__class__.__name__}), 500
