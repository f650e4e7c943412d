from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LedgerEntry
from .repository import AttendanceRepository


def _to_entry(r: Dict[str, Any]) -> LedgerEntry:
    return LedgerEntry(
        entry_id=int(r["entry_id"]),
        user_key=r["user_key"],
        bus=r["bus"],
        recorded_at=r["recorded_at"],
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_user_between(self, user_key: str, start: datetime, end: datetime) -> Optional[LedgerEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_id, user_key, bus, recorded_at, status
                FROM attendance_records
                WHERE user_key=%s AND recorded_at >= %s AND recorded_at < %s
                ORDER BY recorded_at ASC
                LIMIT 1
                """,
                (user_key, start, end),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def create_if_absent(
        self,
        *,
        user_key: str,
        bus: str,
        recorded_at: datetime,
        status: AttendanceStatus,
    ) -> bool:
        # DATETIME keeps whole seconds and MySQL rounds fractions, which would
        # push 23:59:59.6 into the next day.
        recorded_at = recorded_at.replace(microsecond=0)
        # uq_attendance_user_day turns a racing second insert into a no-op.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(user_key, bus, recorded_at, work_date, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user_key, bus, recorded_at, recorded_at.date(), status.value),
            )
            return cur.rowcount > 0

    def list_for_user_between(self, user_key: str, start: datetime, end: datetime) -> Sequence[LedgerEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_id, user_key, bus, recorded_at, status
                FROM attendance_records
                WHERE user_key=%s AND recorded_at BETWEEN %s AND %s
                ORDER BY recorded_at ASC
                """,
                (user_key, start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]
