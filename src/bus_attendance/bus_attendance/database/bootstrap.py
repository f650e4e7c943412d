from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Mapping

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import AttendanceStatus, Role
from ..qr import codec
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = (
    # user_key, name, bus, role, password
    ("admin-b1", "Bus 1 Admin", "B1", Role.ADMIN, "admin123"),
    ("U1", "Alice", "B1", Role.USER, "alice123"),
    ("U2", "Bob", "B1", Role.USER, "bob12345"),
)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs: dict[str, Any] = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable whatever DB_NAME is configured.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Split on ';' outside of quotes; '--' comment lines are dropped.
    buf: list[str] = []
    in_single = False
    in_double = False

    for line in sql.splitlines(keepends=True):
        if not in_single and not in_double and line.lstrip().startswith("--"):
            continue
        for ch in line:
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == ";" and not in_single and not in_double:
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: Mapping[str, Any]) -> None:
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping[str, Any], *, schema_path: str | Path) -> None:
    target = DBConfig.from_mapping(db_config)
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied to %s", target.describe())


def ensure_demo_users(db_config: Mapping[str, Any]) -> None:
    """Create the demo admin and riders if their keys are not taken yet."""
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for user_key, name, bus, role, password in DEMO_ACCOUNTS:
            qr_payload = codec.encode(user_key, name, bus, role.value) if role == Role.USER else None
            cur.execute(
                """
                INSERT IGNORE INTO users(user_key, name, bus, role, password_hash, qr_payload, attendance)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    user_key,
                    name,
                    bus,
                    role.value,
                    generate_password_hash(password),
                    qr_payload,
                    AttendanceStatus.ABSENT.value,
                ),
            )
        conn.commit()
    finally:
        conn.close()
    logger.info("demo accounts ready (%d)", len(DEMO_ACCOUNTS))


def list_tables(db_config: Mapping[str, Any]) -> list[str]:
    conn = _connect(DBConfig.from_mapping(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
