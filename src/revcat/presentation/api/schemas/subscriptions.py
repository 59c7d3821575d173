"""Subscription review schemas."""

from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from revcat.domain.subscription import Subscription


class SubscriptionResponse(BaseModel):
    """Inferred billing attributes of one subscription."""

    id: UUID
    customer_id: UUID
    subscription_id: str
    billing_period: str
    start_date: date
    end_date: Optional[date] = None
    termed: bool
    evergreen: bool
    has_cancellation: bool
    has_ramps: bool
    has_discounts: bool
    currency: str
    status: str
    confidence: Optional[float] = None
    conflict_flags: list[str] = Field(default_factory=list)
    audited: bool
    audited_by: Optional[UUID] = None
    audited_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, entity: Subscription) -> "SubscriptionResponse":
        return cls(
            id=entity.id,
            customer_id=entity.customer_id,
            subscription_id=entity.subscription_id,
            billing_period=entity.billing_period,
            start_date=entity.start_date,
            end_date=entity.end_date,
            termed=entity.termed,
            evergreen=entity.evergreen,
            has_cancellation=entity.has_cancellation,
            has_ramps=entity.has_ramps,
            has_discounts=entity.has_discounts,
            currency=entity.currency,
            status=entity.status,
            confidence=entity.confidence,
            conflict_flags=sorted(entity.conflict_flags),
            audited=entity.audited,
            audited_by=entity.audited_by,
            audited_at=entity.audited_at,
        )


class ToggleAuditRequest(BaseModel):
    actor_id: UUID


class SubscriptionCorrectionRequest(BaseModel):
    """Correct inferred billing attributes. A reason is required."""

    attributes: dict[str, Any]
    reason: str = ""
    actor_id: UUID

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "attributes": {"billing_period": "Annual", "has_ramps": True},
                "reason": "Contract amendment moved billing to annual",
                "actor_id": "550e8400-e29b-41d4-a716-446655440000",
            },
        },
    )
