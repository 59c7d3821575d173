"""Application DTOs."""

from revcat.application.dtos.classification_dto import (
    CategoryFeedbackResult,
    CategoryOperationResult,
    CategoryStats,
    CategoryStatsResult,
    ReclassificationResult,
)

__all__ = [
    "CategoryFeedbackResult",
    "CategoryOperationResult",
    "CategoryStats",
    "CategoryStatsResult",
    "ReclassificationResult",
]
