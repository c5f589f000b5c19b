from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import init_jwt, register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_DAYS
from .database.bootstrap import apply_schema, ensure_admin_user, ensure_username_column, list_tables
from .database.connection import DBConfig
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _bootstrap_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        ensure_username_column(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_admin_user(
            db_config,
            email=getattr(settings, "ADMIN_EMAIL"),
            password=getattr(settings, "ADMIN_PASSWORD"),
        )


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    When ``container`` is given the database is never touched; tests use this
    to run the HTTP layer on in-memory repositories.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["SECRET_KEY"] = getattr(settings, "SECRET_KEY")
    app.config["JWT_SECRET_KEY"] = getattr(settings, "JWT_SECRET_KEY", app.config["SECRET_KEY"])
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(
        days=int(getattr(settings, "JWT_ACCESS_TOKEN_DAYS", DEFAULT_TOKEN_DAYS))
    )
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("Starting with settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())
        _bootstrap_database(settings, db_config)
        container = build_container(db_config=db_config)

    init_jwt(app)
    register_error_handlers(app)

    register_users(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
