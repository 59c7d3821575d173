"""Structured decisions returned by the external classifier."""

from dataclasses import dataclass
from enum import Enum


class RevenueRecognitionTiming(Enum):
    """When revenue for a PRPC is recognised."""

    UPON_BOOKING = "upon booking"
    UPON_BILLING = "upon billing"
    UPON_EVENT = "upon event"


class AmortizationTechnique(Enum):
    """How recognised revenue is spread over time."""

    RATABLE_OVER_TIME = "ratable over time"
    IMMEDIATE = "immediate"


@dataclass(frozen=True)
class CategoryFeedbackDecision:
    """Bulk recategorisation derived from free-text feedback.

    pattern_to_match may be blank; the matcher treats a blank pattern as
    matching nothing.
    """

    new_category: str
    pattern_to_match: str
    rationale: str

    def __post_init__(self) -> None:
        if not self.new_category or not self.new_category.strip():
            msg = "new_category cannot be empty"
            raise ValueError(msg)
        object.__setattr__(self, "new_category", self.new_category.strip())


@dataclass(frozen=True)
class ReclassificationDecision:
    """New classification for a single PRPC."""

    category: str
    pattern_of_business: str
    revenue_recognition_timing: RevenueRecognitionTiming
    amortization_technique: AmortizationTechnique
    rationale: str
    confidence: float  # 0.0 - 1.0

    def __post_init__(self) -> None:
        if not self.category or not self.category.strip():
            msg = "category cannot be empty"
            raise ValueError(msg)
        if not 0.0 <= self.confidence <= 1.0:
            msg = f"Confidence must be between 0.0 and 1.0, got {self.confidence}"
            raise ValueError(msg)
        object.__setattr__(self, "category", self.category.strip())

    @property
    def xp_earned(self) -> int:
        # Gamification score shown in the console
        return round(self.confidence * 100)
