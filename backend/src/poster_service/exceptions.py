"""Domain exceptions raised by the validation layer and services.

Exception handlers in main.py translate them into the standard
error envelope: {"message": "...", "error": "..."}.

    ValidationError  → 400
    ConflictError    → 400
    NotFoundError    → 404
    UnexpectedError  → 500
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    code = "domain_error"

    def __init__(self, message: str, error: str | None = None) -> None:
        self.message = message
        self.error = error or self.code
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when input is missing, malformed or out of range. Detected before any write."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when an operation targets an identity (or owner tag) with no records."""

    code = "not_found"


class ConflictError(DomainError):
    """Raised when a unique field value is already taken."""

    code = "conflict"


class UnexpectedError(DomainError):
    """Raised when the store fails for a reason the caller cannot fix."""

    code = "unexpected_error"
