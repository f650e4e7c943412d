from __future__ import annotations

from typing import Any

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month, month_window
from ..common.validators import require_month, require_non_empty, require_year
from ..core.enums import AttendanceStatus
from .model import MonthlySummary


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def monthly_summary(self, user_key: str, month: Any, year: Any) -> MonthlySummary:
        """Present/absent counts for one rider over a calendar month.

        ``total_days`` is the full length of the month, even for the current or
        a future month, and every day without a Present row counts as absent.
        """
        user_key = require_non_empty(user_key, "userId")
        month = require_month(month)
        year = require_year(year)

        start, end = month_window(year, month)
        entries = list(self._attendance.list_for_user_between(user_key, start, end))

        present = sum(1 for e in entries if e.status == AttendanceStatus.PRESENT)
        total = days_in_month(year, month)

        return MonthlySummary(
            user_key=user_key,
            month=month,
            year=year,
            total_days=total,
            present_days=present,
            absent_days=total - present,
            details=entries,
        )
