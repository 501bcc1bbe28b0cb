"""Custom application exceptions."""

from enum import Enum


class ErrorKind(str, Enum):
    """Error kinds surfaced to API clients."""

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    STORE = "store_error"

    @property
    def status_code(self) -> int:
        """HTTP status code the kind maps to."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE: 500,
}


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, kind: ErrorKind):
        """Initialize exception with message and error kind."""
        self.message = message
        self.kind = kind
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """HTTP status code for this exception."""
        return self.kind.status_code


class ValidationException(AppException):
    """Missing or malformed input."""

    def __init__(self, message: str = "Validation error"):
        """Initialize with validation kind (400)."""
        super().__init__(message, ErrorKind.VALIDATION)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with not-found kind (404)."""
        super().__init__(message, ErrorKind.NOT_FOUND)


class StoreException(AppException):
    """Data access failure; the message is safe to show to callers."""

    def __init__(self, message: str = "Database operation failed"):
        """Initialize with store kind (500)."""
        super().__init__(message, ErrorKind.STORE)
