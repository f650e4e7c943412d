from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import DuplicateIdentity
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Identity, RosterEntry
from .repository import UserRepository


def _to_identity(row: Dict[str, Any]) -> Identity:
    return Identity(
        user_key=row["user_key"],
        name=row["name"],
        bus=row["bus"],
        role=Role(row["role"]),
        password_hash=row["password_hash"],
        qr_payload=row.get("qr_payload"),
        attendance=AttendanceStatus(row.get("attendance") or AttendanceStatus.ABSENT.value),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_key(self, user_key: str) -> Optional[Identity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_key, name, bus, role, password_hash, qr_payload, attendance
                FROM users
                WHERE user_key=%s
                """,
                (user_key,),
            )
            row = fetchone(cur)
            return _to_identity(row) if row else None

    def create_user(
        self,
        *,
        user_key: str,
        name: str,
        bus: str,
        role: Role,
        password_hash: str,
        qr_payload: Optional[str],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO users(user_key, name, bus, role, password_hash, qr_payload, attendance)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (user_key, name, bus, role.value, password_hash, qr_payload, AttendanceStatus.ABSENT.value),
                )
            except mysql.connector.IntegrityError as exc:
                if exc.errno == errorcode.ER_DUP_ENTRY:
                    raise DuplicateIdentity("User ID already exists") from exc
                raise

    def set_attendance(self, user_key: str, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET attendance=%s WHERE user_key=%s",
                (status.value, user_key),
            )

    def list_by_role(self, role: Role) -> Sequence[Identity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_key, name, bus, role, password_hash, qr_payload, attendance
                FROM users
                WHERE role=%s
                ORDER BY user_key ASC
                """,
                (role.value,),
            )
            return [_to_identity(r) for r in fetchall(cur)]

    def list_roster(self, *, bus: str) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_key, name, bus, role, attendance
                FROM users
                WHERE bus=%s AND role=%s
                ORDER BY name ASC
                """,
                (bus, Role.USER.value),
            )
            return [
                RosterEntry(
                    user_key=r["user_key"],
                    name=r["name"],
                    bus=r["bus"],
                    role=Role(r["role"]),
                    attendance=AttendanceStatus(r.get("attendance") or AttendanceStatus.ABSENT.value),
                )
                for r in fetchall(cur)
            ]
