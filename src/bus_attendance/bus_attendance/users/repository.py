from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, Role
from .model import Identity, RosterEntry


class UserRepository(Protocol):
    """Repository interface for identities.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_key(self, user_key: str) -> Optional[Identity]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        user_key: str,
        name: str,
        bus: str,
        role: Role,
        password_hash: str,
        qr_payload: Optional[str],
    ) -> None:
        raise NotImplementedError

    def set_attendance(self, user_key: str, status: AttendanceStatus) -> None:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Identity]:
        raise NotImplementedError

    def list_roster(self, *, bus: str) -> Sequence[RosterEntry]:
        """Users (role=user) of one bus, without password hash or QR payload."""

        raise NotImplementedError
