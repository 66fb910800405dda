from __future__ import annotations

from .enums import NormalizationErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NormalizationError(ValidationError):
    """A single raw row could not be turned into a canonical record."""

    kind: NormalizationErrorKind


class MissingEmployeeName(NormalizationError):
    kind = NormalizationErrorKind.MISSING_EMPLOYEE_NAME

    def __init__(self, message: str = "Missing employee name"):
        super().__init__(message)


class InvalidDate(NormalizationError):
    kind = NormalizationErrorKind.INVALID_DATE

    def __init__(self, value: object = None):
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class MalformedBatch(DomainError):
    """Raised when an upload payload is not a non-empty list of rows."""


class StorageUnavailable(DomainError):
    """Raised when the attendance store cannot be reached or rejects a query."""
