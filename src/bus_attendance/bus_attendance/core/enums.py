from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role. Only USER accounts ride a bus and carry a QR payload."""

    USER = "user"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Status stored on ledger rows and on the per-user daily flag."""

    PRESENT = "Present"
    ABSENT = "Absent"
