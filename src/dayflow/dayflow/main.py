from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.errors import register_error_handlers
from .common.json_provider import DayflowJSONProvider
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_employees, list_tables
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .system.controller import register as register_system

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _register_cors(app: Flask, origins: list[str]) -> None:
    allow_any = "*" in origins

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if allow_any:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin in origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
        else:
            return response
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Pass ``container`` to run the routes over prebuilt repositories; the
    database bootstrap is skipped in that case.
    """

    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = DayflowJSONProvider(app)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    db_config = getattr(settings, "DB_CONFIG")

    if container is None:
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_demo_employees(db_config)
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            app.logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    register_error_handlers(app)
    _register_cors(app, list(getattr(settings, "CORS_ORIGINS", ["*"])))

    register_system(app, container)
    register_employees(app, container)
    register_leaves(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    if app.config["DEBUG"]:
        for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
            app.logger.debug("route %-24s %s", rule.rule, sorted(rule.methods - {"HEAD", "OPTIONS"}))

    return app
