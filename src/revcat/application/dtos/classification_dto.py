"""DTOs returned by classification commands and queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from revcat.domain.classification.entities import LineItemClassification


@dataclass
class CategoryFeedbackResult:
    """Outcome of a free-text category feedback request."""

    updated_count: int
    new_category: str
    rationale: str
    pattern: str
    updated_ids: list[UUID] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return True


@dataclass
class ReclassificationResult:
    """Outcome of reclassifying a single PRPC."""

    classification: LineItemClassification
    xp_earned: int
    revenue_recognition_timing: Optional[str] = None
    amortization_technique: Optional[str] = None


@dataclass
class CategoryOperationResult:
    """Outcome of a category rename or merge."""

    operation: str
    from_category: str
    to_category: str
    affected_count: int
    catalog_updated: bool = False


@dataclass
class CategoryStats:
    """Aggregated statistics for one category."""

    category: str
    prpc_count: int
    subscription_count: int
    avg_confidence: Optional[float]
    approval_rate: float
    needs_review_count: int
    low_confidence_count: int
    medium_confidence_count: int
    high_confidence_count: int


@dataclass
class CategoryStatsResult:
    """Per-category statistics for one customer, ordered by category name."""

    customer_id: UUID
    categories: list[CategoryStats] = field(default_factory=list)

    @property
    def total_prpcs(self) -> int:
        return sum(c.prpc_count for c in self.categories)
