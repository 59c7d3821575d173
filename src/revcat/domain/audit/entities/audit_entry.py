"""Audit entry entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from revcat.domain.audit.value_objects import AuditAction, AuditTarget
from revcat.domain.shared.time import utc_now


@dataclass(frozen=True)
class AuditEntry:
    """
    Immutable record of one mutating operation.

    Entries are appended once and never updated or deleted.
    """

    actor: str
    action: AuditAction
    target: AuditTarget
    before_json: Optional[dict[str, Any]] = None
    after_json: Optional[dict[str, Any]] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.actor:
            msg = "Audit entry actor cannot be empty"
            raise ValueError(msg)

    @property
    def customer_id(self) -> UUID:
        return self.target.customer_id

    @property
    def entity_type(self) -> str:
        return self.target.entity_type.value

    @property
    def entity_id(self) -> str:
        return self.target.entity_id
