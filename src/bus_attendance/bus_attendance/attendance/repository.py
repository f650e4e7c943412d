from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import LedgerEntry


class AttendanceRepository(Protocol):
    def find_for_user_between(self, user_key: str, start: datetime, end: datetime) -> Optional[LedgerEntry]:
        """First entry with ``start <= recorded_at < end``."""

        raise NotImplementedError

    def create_if_absent(
        self,
        *,
        user_key: str,
        bus: str,
        recorded_at: datetime,
        status: AttendanceStatus,
    ) -> bool:
        """Insert unless the user already has a row for that calendar day.

        Returns True when a row was written.
        """

        raise NotImplementedError

    def list_for_user_between(self, user_key: str, start: datetime, end: datetime) -> Sequence[LedgerEntry]:
        """Entries with ``start <= recorded_at <= end``, oldest first."""

        raise NotImplementedError
