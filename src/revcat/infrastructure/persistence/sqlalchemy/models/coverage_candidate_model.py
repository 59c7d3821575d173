"""SQLAlchemy model for subscription coverage candidates (read-only here)."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, Boolean, Float, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from revcat.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class CoverageCandidateModel(Base, TimestampMixin):
    """
    A subscription proposed as representative of some product categories.

    Only read by the category statistics adapter (subscription counts).
    """

    __tablename__ = "subscription_coverage_candidates"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    customer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    subscription_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    covers_product_categories: Mapped[list] = mapped_column(JSON, default=list)
    covers_attributes: Mapped[dict] = mapped_column(JSON, default=dict)
    is_in_minimal_set: Mapped[bool] = mapped_column(Boolean, default=False)
    confidence: Mapped[Optional[float]] = mapped_column(Float)
