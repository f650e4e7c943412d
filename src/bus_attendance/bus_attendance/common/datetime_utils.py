from __future__ import annotations

import calendar
from datetime import datetime, time, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: wrapped so tests can patch it.
    """
    return datetime.now()


def day_window(now: datetime) -> tuple[datetime, datetime]:
    """Half-open [local midnight, next midnight) around ``now``."""
    start = datetime.combine(now.date(), time.min)
    return start, start + timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_window(year: int, month: int) -> tuple[datetime, datetime]:
    """Inclusive [first day 00:00:00, last day 23:59:59] of a month."""
    last_day = days_in_month(year, month)
    start = datetime(year, month, 1)
    end = datetime(year, month, last_day, 23, 59, 59)
    return start, end
