from __future__ import annotations

import json

import pytest

from src.bus_attendance.bus_attendance.core.enums import AttendanceStatus, Role
from src.bus_attendance.bus_attendance.core.exceptions import (
    AuthenticationError,
    DuplicateIdentity,
    IdentityNotFound,
    ValidationError,
)
from src.bus_attendance.bus_attendance.users.service import AuthService, UserService


def test_register_user_stores_hash_and_qr_payload(users_repo):
    svc = UserService(users_repo)

    user = svc.register(user_key="U1", name="Alice", bus="B1", role="user", password="pass1234")

    stored = users_repo.get_by_key("U1")
    assert stored.password_hash != "pass1234"
    assert stored.attendance == AttendanceStatus.ABSENT
    assert json.loads(stored.qr_payload) == {"userId": "U1", "name": "Alice", "bus": "B1", "role": "user"}
    assert user.role == Role.USER


def test_register_admin_gets_no_qr_payload(users_repo):
    UserService(users_repo).register(user_key="A1", name="Driver", bus="B1", role="admin", password="pass1234")
    assert users_repo.get_by_key("A1").qr_payload is None


@pytest.mark.parametrize("missing", ["user_key", "name", "bus", "role", "password"])
def test_register_requires_every_field(users_repo, missing):
    fields = {"user_key": "U1", "name": "Alice", "bus": "B1", "role": "user", "password": "pass1234"}
    fields[missing] = ""

    with pytest.raises(ValidationError):
        UserService(users_repo).register(**fields)


def test_register_rejects_unknown_role(users_repo):
    with pytest.raises(ValidationError):
        UserService(users_repo).register(user_key="U1", name="Alice", bus="B1", role="driver", password="pass1234")


def test_register_rejects_short_password(users_repo):
    with pytest.raises(ValidationError):
        UserService(users_repo, password_min_length=8).register(
            user_key="U1", name="Alice", bus="B1", role="user", password="short"
        )


def test_register_rejects_duplicate_key(users_repo):
    users_repo.add("U1", "Alice", "B1")
    with pytest.raises(DuplicateIdentity):
        UserService(users_repo).register(user_key="U1", name="Other", bus="B2", role="user", password="pass1234")


def test_login_returns_profile_and_qr(users_repo):
    users_repo.add("U1", "Alice", "B1", password="pass1234")

    result = AuthService(users_repo).authenticate("  U1 ", "pass1234")

    assert result.to_dict()["name"] == "Alice"
    assert result.to_dict()["bus"] == "B1"
    assert json.loads(result.qr_payload)["userId"] == "U1"


def test_login_wrong_password(users_repo):
    users_repo.add("U1", "Alice", "B1", password="pass1234")
    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("U1", "nope")


def test_login_unknown_user(users_repo):
    with pytest.raises(IdentityNotFound):
        AuthService(users_repo).authenticate("ghost", "pass1234")


def test_login_requires_both_fields(users_repo):
    with pytest.raises(ValidationError):
        AuthService(users_repo).authenticate("U1", "")


def test_roster_lists_riders_of_one_bus_without_secrets(users_repo):
    users_repo.add("U1", "Alice", "B1")
    users_repo.add("U2", "Bob", "B2")
    users_repo.add("A1", "Station", "B1", role=Role.ADMIN)

    roster = UserService(users_repo).list_by_bus("B1")

    assert [r.user_key for r in roster] == ["U1"]
    row = roster[0].to_dict()
    assert "password" not in json.dumps(row)
    assert not {"password_hash", "qr_payload", "qrCode"} & set(row)


def test_password_with_surrounding_spaces_is_kept_as_typed(users_repo):
    UserService(users_repo).register(user_key="U1", name="Alice", bus="B1", role="user", password=" pass1234 ")

    auth = AuthService(users_repo)
    assert auth.authenticate("U1", " pass1234 ").name == "Alice"
    with pytest.raises(AuthenticationError):
        auth.authenticate("U1", "pass1234")


def test_register_rejects_blank_password(users_repo):
    with pytest.raises(ValidationError):
        UserService(users_repo).register(user_key="U1", name="Alice", bus="B1", role="user", password="      ")


@pytest.mark.parametrize(
    "field, value",
    [("user_key", "u" * 65), ("name", "n" * 121), ("bus", "b" * 33)],
)
def test_register_rejects_values_wider_than_columns(users_repo, field, value):
    fields = {"user_key": "U1", "name": "Alice", "bus": "B1", "role": "user", "password": "pass1234"}
    fields[field] = value

    with pytest.raises(ValidationError):
        UserService(users_repo).register(**fields)
    assert users_repo.by_key == {}


def test_register_accepts_values_at_column_width(users_repo):
    user = UserService(users_repo).register(
        user_key="u" * 64, name="n" * 120, bus="b" * 32, role="user", password="pass1234"
    )
    assert users_repo.get_by_key(user.user_key) is not None
