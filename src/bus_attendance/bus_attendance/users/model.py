from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, Role


@dataclass(frozen=True)
class Identity:
    """Domain entity: a registered rider or admin account.

    ``attendance`` is the "scanned today" convenience flag. It is overwritten on
    every successful scan and is never used for reporting.
    """

    user_key: str
    name: str
    bus: str
    role: Role
    password_hash: str
    qr_payload: Optional[str] = None
    attendance: AttendanceStatus = AttendanceStatus.ABSENT


@dataclass(frozen=True)
class RosterEntry:
    """Read-model for the admin roster. Carries no secrets or QR material."""

    user_key: str
    name: str
    bus: str
    role: Role
    attendance: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "userId": self.user_key,
            "name": self.name,
            "bus": self.bus,
            "role": self.role.value,
            "attendance": self.attendance.value,
        }
