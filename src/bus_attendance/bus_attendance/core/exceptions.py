class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or invalid (bad request)."""


class DuplicateIdentity(ValidationError):
    """Raised when registering a user key that already exists."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class MalformedPayload(DomainError):
    """Raised when a scanned QR payload cannot be parsed."""


class MissingIdentityField(MalformedPayload):
    """Raised when a QR payload parses but carries no user id."""


class IdentityNotFound(DomainError):
    """Raised when no identity exists for the given user key."""


class GroupMismatch(DomainError):
    """Raised when a QR code is scanned at another bus's station."""


class StoreFailure(DomainError):
    """Raised when the underlying database call fails."""
