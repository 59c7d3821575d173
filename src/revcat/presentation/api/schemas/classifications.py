"""Classification schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from revcat.domain.classification.entities import LineItemClassification


class ClassificationResponse(BaseModel):
    """Response schema for one PRPC classification."""

    id: UUID
    customer_id: UUID
    prpc_id: str
    product_name: str
    rate_plan_name: str
    charge_name: str
    inferred_category: Optional[str] = None
    inferred_pattern_of_business: Optional[str] = None
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)
    status: str = Field(description="inferred, user_adjusted, approved or processing")
    rationale: Optional[str] = None
    conflict_flags: list[str] = Field(default_factory=list)
    needs_review: bool = False
    source_agent: Optional[str] = None
    last_reviewed_by: Optional[UUID] = None
    last_reviewed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, entity: LineItemClassification) -> "ClassificationResponse":
        return cls(
            id=entity.id,
            customer_id=entity.customer_id,
            prpc_id=entity.prpc_id,
            product_name=entity.product_name,
            rate_plan_name=entity.rate_plan_name,
            charge_name=entity.charge_name,
            inferred_category=entity.inferred_category,
            inferred_pattern_of_business=entity.inferred_pattern_of_business,
            confidence=entity.confidence,
            status=entity.status.value,
            rationale=entity.rationale,
            conflict_flags=sorted(entity.conflict_flags),
            needs_review=entity.needs_review,
            source_agent=entity.source_agent,
            last_reviewed_by=entity.last_reviewed_by,
            last_reviewed_at=entity.last_reviewed_at,
        )


class ReclassifyRequest(BaseModel):
    """Ask the classifier to reclassify one PRPC from analyst feedback."""

    feedback: str = Field(description="Why the current classification is wrong")
    reviewer_id: UUID = Field(description="Analyst submitting the feedback")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "feedback": "This is a one-time hardware sale, not a subscription",
                "reviewer_id": "550e8400-e29b-41d4-a716-446655440000",
            },
        },
    )


class ReclassifyResponse(BaseModel):
    """Result of an AI reclassification."""

    classification: ClassificationResponse
    xp_earned: int = Field(description="round(confidence * 100)")
    revenue_recognition_timing: Optional[str] = None
    amortization_technique: Optional[str] = None


class CorrectClassificationRequest(BaseModel):
    """Manual reclassification. Every field is required."""

    category: str = ""
    pattern_of_business: str = ""
    reason: str = ""
    reviewer_id: UUID


class ApproveClassificationRequest(BaseModel):
    """Confirm a classification as correct."""

    reviewer_id: UUID
