"""Shared domain exceptions and error codes.

Every error raised by the domain, application and infrastructure layers
derives from DomainException so the presentation layer can translate it
into a consistent response without ever leaking transport exceptions.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_FEEDBACK = "EMPTY_FEEDBACK"
    MISSING_SELECTION = "MISSING_SELECTION"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    CLASSIFICATION_NOT_FOUND = "CLASSIFICATION_NOT_FOUND"
    SUBSCRIPTION_NOT_FOUND = "SUBSCRIPTION_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    DUPLICATE_CATEGORY = "DUPLICATE_CATEGORY"

    # Business Rule Violations (422)
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    # Record store errors (503)
    DATA_ACCESS_FAILED = "DATA_ACCESS_FAILED"

    # External classifier errors (502/503)
    CLASSIFIER_UNAVAILABLE = "CLASSIFIER_UNAVAILABLE"
    CLASSIFIER_CONTRACT_VIOLATION = "CLASSIFIER_CONTRACT_VIOLATION"

    # Multi-step operations that stopped halfway
    PARTIAL_OPERATION = "PARTIAL_OPERATION"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class BusinessRuleViolation(DomainException):
    """Raised when a business rule or domain invariant is violated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class DataAccessError(DomainException):
    """Raised when the record store fails to read or write.

    Repositories translate driver exceptions into this error so callers
    never see SQLAlchemy types.
    """

    def __init__(
        self,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"Data access failed while trying to {operation}",
            ErrorCode.DATA_ACCESS_FAILED,
            details,
        )
        self.operation = operation
