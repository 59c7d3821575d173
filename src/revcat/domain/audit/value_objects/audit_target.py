"""What an audit entry is about.

Persisted as an (entity_type, entity_id, customer_id) triple; in code it is
one of three concrete target types so consumers handle every kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union
from uuid import UUID


class AuditEntityType(Enum):
    """Discriminator stored in the entity_type column."""

    CLASSIFICATION = "prpc"
    SUBSCRIPTION = "subscription"
    CATEGORY = "category"


@dataclass(frozen=True)
class ClassificationTarget:
    """A single line-item classification."""

    classification_id: UUID
    customer_id: UUID

    @property
    def entity_type(self) -> AuditEntityType:
        return AuditEntityType.CLASSIFICATION

    @property
    def entity_id(self) -> str:
        return str(self.classification_id)


@dataclass(frozen=True)
class SubscriptionTarget:
    """A single subscription."""

    subscription_id: UUID
    customer_id: UUID

    @property
    def entity_type(self) -> AuditEntityType:
        return AuditEntityType.SUBSCRIPTION

    @property
    def entity_id(self) -> str:
        return str(self.subscription_id)


@dataclass(frozen=True)
class CategoryOperationTarget:
    """A category-level operation (rename, merge) spanning many records."""

    customer_id: UUID

    @property
    def entity_type(self) -> AuditEntityType:
        return AuditEntityType.CATEGORY

    @property
    def entity_id(self) -> str:
        return str(self.customer_id)


AuditTarget = Union[ClassificationTarget, SubscriptionTarget, CategoryOperationTarget]


def audit_target_from_columns(
    entity_type: str,
    entity_id: str,
    customer_id: UUID,
) -> AuditTarget:
    """Rebuild a target from its persisted columns."""
    kind = AuditEntityType(entity_type)
    if kind == AuditEntityType.CLASSIFICATION:
        return ClassificationTarget(UUID(entity_id), customer_id)
    if kind == AuditEntityType.SUBSCRIPTION:
        return SubscriptionTarget(UUID(entity_id), customer_id)
    return CategoryOperationTarget(customer_id)
