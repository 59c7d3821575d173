"""Audit domain value objects."""

from revcat.domain.audit.value_objects.audit_action import SYSTEM_ACTOR, AuditAction
from revcat.domain.audit.value_objects.audit_target import (
    AuditEntityType,
    AuditTarget,
    CategoryOperationTarget,
    ClassificationTarget,
    SubscriptionTarget,
    audit_target_from_columns,
)

__all__ = [
    "SYSTEM_ACTOR",
    "AuditAction",
    "AuditEntityType",
    "AuditTarget",
    "CategoryOperationTarget",
    "ClassificationTarget",
    "SubscriptionTarget",
    "audit_target_from_columns",
]
