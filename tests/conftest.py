from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.bus_attendance.bus_attendance.attendance.model import LedgerEntry
from src.bus_attendance.bus_attendance.container import build_services
from src.bus_attendance.bus_attendance.core.enums import AttendanceStatus, Role
from src.bus_attendance.bus_attendance.main import create_app
from src.bus_attendance.bus_attendance.qr import codec
from src.bus_attendance.bus_attendance.users.model import Identity, RosterEntry


class InMemoryUsers:
    def __init__(self):
        self.by_key: dict[str, Identity] = {}

    def add(self, user_key: str, name: str, bus: str, *, role: Role = Role.USER, password: str = "secret") -> Identity:
        identity = Identity(
            user_key=user_key,
            name=name,
            bus=bus,
            role=role,
            password_hash=generate_password_hash(password),
            qr_payload=codec.encode(user_key, name, bus, role.value) if role == Role.USER else None,
        )
        self.by_key[user_key] = identity
        return identity

    def get_by_key(self, user_key: str) -> Optional[Identity]:
        return self.by_key.get(user_key)

    def create_user(self, *, user_key, name, bus, role, password_hash, qr_payload) -> None:
        self.by_key[user_key] = Identity(
            user_key=user_key,
            name=name,
            bus=bus,
            role=role,
            password_hash=password_hash,
            qr_payload=qr_payload,
        )

    def set_attendance(self, user_key: str, status: AttendanceStatus) -> None:
        user = self.by_key.get(user_key)
        if user:
            self.by_key[user_key] = replace(user, attendance=status)

    def list_by_role(self, role: Role):
        return [u for u in self.by_key.values() if u.role == role]

    def list_roster(self, *, bus: str):
        return [
            RosterEntry(user_key=u.user_key, name=u.name, bus=u.bus, role=u.role, attendance=u.attendance)
            for u in self.by_key.values()
            if u.bus == bus and u.role == Role.USER
        ]


class InMemoryAttendance:
    def __init__(self):
        self.entries: list[LedgerEntry] = []

    def add(self, user_key: str, bus: str, recorded_at: datetime, status: AttendanceStatus) -> LedgerEntry:
        entry = LedgerEntry(
            entry_id=len(self.entries) + 1,
            user_key=user_key,
            bus=bus,
            recorded_at=recorded_at,
            status=status,
        )
        self.entries.append(entry)
        return entry

    def for_user(self, user_key: str) -> list[LedgerEntry]:
        return [e for e in self.entries if e.user_key == user_key]

    def find_for_user_between(self, user_key, start, end):
        for e in self.entries:
            if e.user_key == user_key and start <= e.recorded_at < end:
                return e
        return None

    def create_if_absent(self, *, user_key, bus, recorded_at, status) -> bool:
        if any(e.user_key == user_key and e.recorded_at.date() == recorded_at.date() for e in self.entries):
            return False
        self.add(user_key, bus, recorded_at, status)
        return True

    def list_for_user_between(self, user_key, start, end):
        items = [e for e in self.entries if e.user_key == user_key and start <= e.recorded_at <= end]
        return sorted(items, key=lambda e: e.recorded_at)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 10, 7, 45, 0)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(users_repo, attendance_repo):
    return build_services(users_repo=users_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
