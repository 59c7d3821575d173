"""Audit trail schemas."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

from revcat.domain.audit import AuditEntry


class AuditEntryResponse(BaseModel):
    id: UUID
    actor: str
    action: str
    entity_type: str
    entity_id: str
    customer_id: UUID
    before_json: Optional[dict[str, Any]] = None
    after_json: Optional[dict[str, Any]] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: AuditEntry) -> "AuditEntryResponse":
        return cls(
            id=entry.id,
            actor=entry.actor,
            action=entry.action.value,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            customer_id=entry.customer_id,
            before_json=entry.before_json,
            after_json=entry.after_json,
            created_at=entry.created_at,
        )


class AuditEntryListResponse(BaseModel):
    entries: list[AuditEntryResponse]
    count: int
