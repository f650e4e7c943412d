from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import day_window, now_local
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import GroupMismatch, IdentityNotFound, ValidationError
from ..qr import codec
from ..users.repository import UserRepository
from .model import ScanResult, SweepResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: validate a QR scan at a bus station, back-fill absentees."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def scan(self, raw_payload: Any, scanning_bus: Any, *, now: Optional[datetime] = None) -> ScanResult:
        if not raw_payload or scanning_bus is None or not str(scanning_bus).strip():
            raise ValidationError("Missing scanned data or admin bus")
        # decode() yields the QR bus as text; compare like with like.
        scanning_bus = str(scanning_bus)

        payload = codec.decode(raw_payload)

        user = self._users.get_by_key(payload.user_key)
        if not user:
            logger.warning("scan rejected: unknown user %r at bus %r", payload.user_key, scanning_bus)
            raise IdentityNotFound("User not found")

        # Station checks the bus printed in the QR; the ledger row takes the stored bus.
        if payload.bus != scanning_bus:
            logger.warning("scan rejected: user %r holds bus %r, station is %r", user.user_key, payload.bus, scanning_bus)
            raise GroupMismatch("Invalid user for this bus")

        self._users.set_attendance(user.user_key, AttendanceStatus.PRESENT)

        now = now or now_local()
        created = self._record_if_missing(user.user_key, user.bus, AttendanceStatus.PRESENT, now)
        if created:
            logger.info("attendance marked present: user=%s bus=%s", user.user_key, user.bus)
        else:
            logger.info("repeat scan ignored: user=%s already recorded today", user.user_key)

        return ScanResult(user_key=user.user_key, name=user.name, bus=user.bus, created=created)

    def auto_absent(self, *, now: Optional[datetime] = None) -> SweepResult:
        """Mark every rider without a row for today as Absent.

        Safe to run more than once a day; existing rows are never touched.
        """
        now = now or now_local()
        users = self._users.list_by_role(Role.USER)

        marked = 0
        for user in users:
            if self._record_if_missing(user.user_key, user.bus, AttendanceStatus.ABSENT, now):
                marked += 1

        logger.info("auto-absent sweep: checked=%d marked_absent=%d", len(users), marked)
        return SweepResult(checked=len(users), marked_absent=marked)

    def _record_if_missing(self, user_key: str, bus: str, status: AttendanceStatus, now: datetime) -> bool:
        start, end = day_window(now)
        if self._attendance.find_for_user_between(user_key, start, end):
            return False
        return self._attendance.create_if_absent(user_key=user_key, bus=bus, recorded_at=now, status=status)
