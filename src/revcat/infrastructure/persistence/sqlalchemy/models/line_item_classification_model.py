"""SQLAlchemy model for LineItemClassification entity."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, Float, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from revcat.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class LineItemClassificationModel(Base, TimestampMixin):
    """
    One inferred classification per PRPC (product / rate plan / charge).

    Categories are stored by name; there is no foreign key to the catalog.
    """

    __tablename__ = "prpc_inferences"

    __table_args__ = (
        Index("ix_prpc_customer_category", "customer_id", "inferred_category"),
        Index("ix_prpc_customer_confidence", "customer_id", "confidence"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)
    customer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    prpc_id: Mapped[str] = mapped_column(String(255), nullable=False)

    product_name: Mapped[str] = mapped_column(String(500), nullable=False)
    rate_plan_name: Mapped[str] = mapped_column(String(500), nullable=False)
    charge_name: Mapped[str] = mapped_column(String(500), nullable=False)

    inferred_category: Mapped[Optional[str]] = mapped_column(String(255))
    inferred_pattern_of_business: Mapped[Optional[str]] = mapped_column(String(255))
    confidence: Mapped[Optional[float]] = mapped_column(Float)
    status: Mapped[str] = mapped_column(String(32), default="inferred")
    rationale: Mapped[Optional[str]] = mapped_column(Text)

    # Stored as a JSON list of strings
    conflict_flags: Mapped[list] = mapped_column(JSON, default=list)
    needs_review: Mapped[bool] = mapped_column(Boolean, default=False)
    source_agent: Mapped[Optional[str]] = mapped_column(String(255))

    last_reviewed_by: Mapped[Optional[UUID]] = mapped_column(Uuid)
    last_reviewed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
    )

    def __repr__(self) -> str:
        return (
            f"<LineItemClassificationModel(id={self.id}, prpc_id={self.prpc_id}, "
            f"category={self.inferred_category}, status={self.status})>"
        )
