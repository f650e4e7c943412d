from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_max_length, require_min_length, require_non_empty
from ..core.constants import DEFAULT_PASSWORD_MIN_LENGTH, MAX_BUS_LENGTH, MAX_NAME_LENGTH, MAX_USER_KEY_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateIdentity, IdentityNotFound, ValidationError
from ..qr import codec
from .model import Identity, RosterEntry
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """What the client keeps after a successful login."""

    user_key: str
    name: str
    bus: str
    role: Role
    qr_payload: Optional[str]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "userId": self.user_key,
            "bus": self.bus,
            "role": self.role.value,
            "qrCode": self.qr_payload,
        }


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, user_key: Any, password: Any) -> LoginResult:
        if not user_key or not password or not isinstance(user_key, str):
            raise ValidationError("Enter both ID and password")

        user = self._users.get_by_key(user_key.strip())
        if not user:
            raise IdentityNotFound("User not found")

        try:
            ok = check_password_hash(user.password_hash, str(password))
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid password")

        return LoginResult(
            user_key=user.user_key,
            name=user.name,
            bus=user.bus,
            role=user.role,
            qr_payload=user.qr_payload,
        )


class UserService:
    """Use cases: register riders/admins, list a bus roster."""

    def __init__(self, users: UserRepository, *, password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH):
        self._users = users
        self._password_min_length = int(password_min_length)

    def register(self, *, user_key: Any, name: Any, bus: Any, role: Any, password: Any) -> Identity:
        if not all([user_key, name, bus, role, password]):
            raise ValidationError("All fields are required")

        user_key = require_non_empty(user_key, "userId")
        name = require_non_empty(name, "name")
        bus = require_non_empty(bus, "bus")
        require_max_length(user_key, "userId", MAX_USER_KEY_LENGTH)
        require_max_length(name, "name", MAX_NAME_LENGTH)
        require_max_length(bus, "bus", MAX_BUS_LENGTH)

        # Passwords are hashed as typed; surrounding spaces are significant.
        if not isinstance(password, str) or not password.strip():
            raise ValidationError("password is required")
        require_min_length(password, "password", self._password_min_length)

        try:
            role = Role(str(role).strip().lower())
        except ValueError:
            raise ValidationError("role must be 'user' or 'admin'") from None

        if self._users.get_by_key(user_key):
            raise DuplicateIdentity("User ID already exists")

        qr_payload = codec.encode(user_key, name, bus, role.value) if role == Role.USER else None
        password_hash = generate_password_hash(password)

        self._users.create_user(
            user_key=user_key,
            name=name,
            bus=bus,
            role=role,
            password_hash=password_hash,
            qr_payload=qr_payload,
        )
        logger.info("registered %s %r on bus %r", role.value, user_key, bus)

        return Identity(
            user_key=user_key,
            name=name,
            bus=bus,
            role=role,
            password_hash=password_hash,
            qr_payload=qr_payload,
        )

    def list_by_bus(self, bus: Any) -> list[RosterEntry]:
        bus = require_non_empty(bus, "bus")
        return list(self._users.list_roster(bus=bus))

    def get_qr_payload(self, user_key: str) -> str:
        user = self._users.get_by_key(user_key)
        if not user:
            raise IdentityNotFound("User not found")
        if not user.qr_payload:
            raise IdentityNotFound("No QR code for this user")
        return user.qr_payload
