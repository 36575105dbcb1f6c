"""Application error taxonomy. Each error maps to one HTTP status."""

from typing import Any


class AppError(Exception):
    """Base error rendered as {"error": message, "details": ...}."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, details: Any = None) -> None:
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class RequestValidationFailed(AppError):
    status_code = 400
    message = "Validation failed"


class AuthError(AppError):
    """Credential mismatch. Reserved for sign-in."""

    status_code = 401
    message = "Invalid credentials"


class ConflictError(AppError):
    status_code = 409
    message = "Resource already exists"


class InternalError(AppError):
    """Server-side failure. The message is never shown to clients."""

    status_code = 500


class HashingError(InternalError):
    message = "Password hashing failed"


class ConfigError(InternalError):
    message = "Server configuration error"


class PersistenceError(InternalError):
    message = "Persistence failed"


class FeatureNotImplementedError(AppError):
    status_code = 501
    message = "Not implemented"
