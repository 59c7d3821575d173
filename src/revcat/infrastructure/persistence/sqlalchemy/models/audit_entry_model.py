"""SQLAlchemy model for AuditEntry entity."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from revcat.domain.shared.time import utc_now
from revcat.infrastructure.persistence.sqlalchemy.models.base import Base


class AuditEntryModel(Base):
    """
    Append-only audit log.

    entity_type discriminates what entity_id points at (prpc, subscription,
    category). Rows are inserted once and never updated.
    """

    __tablename__ = "audit_log"

    __table_args__ = (
        Index("ix_audit_customer_created", "customer_id", "created_at"),
        Index("ix_audit_entity", "entity_type", "entity_id"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)
    actor: Mapped[str] = mapped_column(String(255), nullable=False)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(32), nullable=False)
    entity_id: Mapped[str] = mapped_column(String(64), nullable=False)
    customer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    before_json: Mapped[Optional[dict]] = mapped_column(JSON)
    after_json: Mapped[Optional[dict]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditEntryModel(id={self.id}, action={self.action}, "
            f"entity={self.entity_type}:{self.entity_id})>"
        )
