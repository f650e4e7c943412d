from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class LedgerEntry:
    """Domain entity: one day's attendance row for one rider."""

    entry_id: int
    user_key: str
    bus: str
    recorded_at: datetime
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "userId": self.user_key,
            "bus": self.bus,
            "date": self.recorded_at.isoformat(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ScanResult:
    """Station-side feedback after an accepted scan."""

    user_key: str
    name: str
    bus: str
    created: bool


@dataclass(frozen=True)
class SweepResult:
    checked: int
    marked_absent: int
