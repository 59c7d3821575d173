"""SQLAlchemy model for Subscription entity."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from revcat.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class SubscriptionModel(Base, TimestampMixin):
    """Inferred billing attributes of a customer subscription."""

    __tablename__ = "subscriptions"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    customer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    subscription_id: Mapped[str] = mapped_column(String(255), nullable=False)

    billing_period: Mapped[str] = mapped_column(String(64), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    termed: Mapped[bool] = mapped_column(Boolean, default=False)
    evergreen: Mapped[bool] = mapped_column(Boolean, default=False)
    has_cancellation: Mapped[bool] = mapped_column(Boolean, default=False)
    has_ramps: Mapped[bool] = mapped_column(Boolean, default=False)
    has_discounts: Mapped[bool] = mapped_column(Boolean, default=False)
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    status: Mapped[str] = mapped_column(String(32), default="active")

    confidence: Mapped[Optional[float]] = mapped_column(Float)
    conflict_flags: Mapped[list] = mapped_column(JSON, default=list)
    derivation_trace: Mapped[dict] = mapped_column(JSON, default=dict)

    audited: Mapped[bool] = mapped_column(Boolean, default=False)
    audited_by: Mapped[Optional[UUID]] = mapped_column(Uuid)
    audited_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return (
            f"<SubscriptionModel(id={self.id}, "
            f"subscription_id={self.subscription_id}, audited={self.audited})>"
        )
