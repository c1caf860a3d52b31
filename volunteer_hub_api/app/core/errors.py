"""Domain errors raised by services and translated to HTTP responses."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, user-safe message and HTTP status."""

    code: ErrorCode
    message: str
    status_code: int = 400

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict:
        return {"status": self.status_code, "code": self.code.value, "error": self.message}


class ValidationError(DomainError):
    """Raised when a request body is missing fields or has the wrong types."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message, status_code=400)


class ConflictError(DomainError):
    """Raised when a record would break a uniqueness rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message, status_code=400)


class NotFoundError(DomainError):
    """Raised when a lookup by ID finds nothing."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message, status_code=404)


class InternalError(DomainError):
    """Raised when building or storing a record fails unexpectedly."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INTERNAL_ERROR, message=message, status_code=500)
