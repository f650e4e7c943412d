from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_PASSWORD_MIN_LENGTH, DEFAULT_QR_BORDER, DEFAULT_QR_BOX_SIZE
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    ``container`` lets callers (tests, scripts) supply pre-wired services; when
    omitted the MySQL-backed container is built from ``DB_CONFIG``.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["QR_BOX_SIZE"] = int(getattr(settings, "QR_BOX_SIZE", DEFAULT_QR_BOX_SIZE))
    app.config["QR_BORDER"] = int(getattr(settings, "QR_BORDER", DEFAULT_QR_BORDER))
    password_min_length = int(getattr(settings, "PASSWORD_MIN_LENGTH", DEFAULT_PASSWORD_MIN_LENGTH))

    if container is None:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(db_config)
        container = build_container(db_config=db_config, password_min_length=password_min_length)

    register_users(app, container)
    register_attendance(app, container)

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"}), 200

    @app.cli.command("auto-absent")
    def auto_absent_command():
        """Mark riders not scanned today as Absent (run once a day from cron)."""
        result = container.attendance_service.auto_absent()
        click.echo(f"checked={result.checked} marked_absent={result.marked_absent}")

    return app
