"""Category schemas: bulk feedback, rename, merge and statistics."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategoryFeedbackRequest(BaseModel):
    """Free-text feedback about a customer's categorization.

    Validation of the text happens in the domain so the error code is
    EMPTY_FEEDBACK rather than a generic schema error.
    """

    customer_id: UUID
    feedback: str = ""
    scope_category: Optional[str] = Field(
        None,
        description="Only consider PRPCs currently in this category",
    )
    low_confidence_only: bool = Field(
        False,
        description="Only consider PRPCs with confidence below 0.4",
    )
    actor_id: Optional[UUID] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_id": "550e8400-e29b-41d4-a716-446655440000",
                "feedback": "Everything with 'server' in the name is Hardware",
                "scope_category": "SaaS",
                "low_confidence_only": False,
            },
        },
    )


class CategoryFeedbackResponse(BaseModel):
    """Outcome of a feedback request."""

    updated_count: int
    new_category: str
    rationale: str
    pattern: str


class RenameCategoryRequest(BaseModel):
    customer_id: UUID
    old_name: str
    new_name: str
    actor_id: Optional[UUID] = None


class RenameCategoryResponse(BaseModel):
    renamed_count: int


class MergeCategoryRequest(BaseModel):
    customer_id: UUID
    from_category: str
    to_category: str
    actor_id: Optional[UUID] = None


class MergeCategoryResponse(BaseModel):
    merged_count: int


class CategoryStatsResponse(BaseModel):
    """Aggregated statistics for one category."""

    category: str
    prpc_count: int
    subscription_count: int
    avg_confidence: Optional[float] = None
    approval_rate: float
    needs_review_count: int
    low_confidence_count: int = Field(description="confidence < 0.4")
    medium_confidence_count: int = Field(description="0.4 <= confidence < 0.7")
    high_confidence_count: int = Field(description="confidence >= 0.7")


class CategoryStatsListResponse(BaseModel):
    customer_id: UUID
    categories: list[CategoryStatsResponse]
    total_prpcs: int
