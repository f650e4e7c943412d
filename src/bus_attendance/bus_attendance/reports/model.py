from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import LedgerEntry


@dataclass(frozen=True)
class MonthlySummary:
    user_key: str
    month: int
    year: int
    total_days: int
    present_days: int
    absent_days: int
    details: list[LedgerEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "userId": self.user_key,
            "month": self.month,
            "year": self.year,
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "details": [e.to_dict() for e in self.details],
        }
