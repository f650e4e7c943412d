from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PASSWORD_MIN_LENGTH
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
) -> Container:
    """Wire services around any repository pair (MySQL or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, password_min_length=password_min_length),
        attendance_service=AttendanceService(attendance_repo, users_repo),
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: Mapping[str, Any], password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        password_min_length=password_min_length,
    )
