"""JSON payload carried inside a rider's QR code.

The payload is a flat JSON object with the keys ``userId``, ``name``, ``bus``
and ``role``. Scanning stations post it back verbatim (usually as the decoded
string, sometimes already parsed by the browser).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..core.constants import QR_FIELD_BUS, QR_FIELD_NAME, QR_FIELD_ROLE, QR_FIELD_USER_ID
from ..core.exceptions import MalformedPayload, MissingIdentityField


@dataclass(frozen=True)
class QRPayload:
    user_key: str
    name: Optional[str]
    bus: Optional[str]
    role: Optional[str]

    def to_dict(self) -> dict:
        return {
            QR_FIELD_USER_ID: self.user_key,
            QR_FIELD_NAME: self.name,
            QR_FIELD_BUS: self.bus,
            QR_FIELD_ROLE: self.role,
        }


def encode(user_key: str, name: str, bus: str, role: str) -> str:
    payload = QRPayload(user_key=user_key, name=name, bus=bus, role=str(getattr(role, "value", role)))
    return json.dumps(payload.to_dict())


def decode(raw: Union[str, bytes, Mapping[str, Any]]) -> QRPayload:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedPayload("QR payload is not valid UTF-8") from None

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except ValueError:
            raise MalformedPayload("QR payload is not valid JSON") from None
    else:
        data = raw

    if not isinstance(data, Mapping):
        raise MalformedPayload("QR payload must be a JSON object")

    user_key = data.get(QR_FIELD_USER_ID)
    if user_key is None or (isinstance(user_key, str) and not user_key.strip()):
        raise MissingIdentityField("QR payload has no userId")

    return QRPayload(
        user_key=str(user_key),
        name=_optional_str(data.get(QR_FIELD_NAME)),
        bus=_optional_str(data.get(QR_FIELD_BUS)),
        role=_optional_str(data.get(QR_FIELD_ROLE)),
    )


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
