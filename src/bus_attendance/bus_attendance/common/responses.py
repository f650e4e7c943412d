from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    AuthenticationError,
    DomainError,
    DuplicateIdentity,
    GroupMismatch,
    IdentityNotFound,
    MalformedPayload,
    MissingIdentityField,
    StoreFailure,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific classes first.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int, str | None], ...] = (
    (DuplicateIdentity, 409, None),
    (MissingIdentityField, 400, "QR missing userId field"),
    (MalformedPayload, 400, "Invalid QR format"),
    (ValidationError, 400, None),
    (AuthenticationError, 400, None),
    (IdentityNotFound, 404, None),
    (GroupMismatch, 400, None),
    (StoreFailure, 500, "Internal server error"),
)


def error_response(exc: Exception):
    """Map a service exception to ``(json, status)``.

    Anything that is not a known domain error is logged and reported as a
    generic 500.
    """
    for error_type, status, message in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            if status >= 500:
                logger.error("request failed: %s", exc)
            return jsonify({"success": False, "message": message or str(exc)}), status

    logger.exception("unexpected error", exc_info=exc)
    return jsonify({"success": False, "message": "Internal server error"}), 500
