"""Audit domain: append-only trail of classification and subscription changes."""

from revcat.domain.audit.entities import AuditEntry
from revcat.domain.audit.repositories import AuditEntryRepository
from revcat.domain.audit.value_objects import (
    SYSTEM_ACTOR,
    AuditAction,
    AuditEntityType,
    AuditTarget,
    CategoryOperationTarget,
    ClassificationTarget,
    SubscriptionTarget,
)

__all__ = [
    "SYSTEM_ACTOR",
    "AuditAction",
    "AuditEntityType",
    "AuditEntry",
    "AuditEntryRepository",
    "AuditTarget",
    "CategoryOperationTarget",
    "ClassificationTarget",
    "SubscriptionTarget",
]
