"""Shared kernel: exceptions and time helpers used by all bounded contexts."""

from revcat.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DataAccessError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from revcat.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DataAccessError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
