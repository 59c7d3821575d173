"""Pydantic schemas for API request/response models."""

from revcat.presentation.api.schemas.audit import (
    AuditEntryListResponse,
    AuditEntryResponse,
)
from revcat.presentation.api.schemas.categories import (
    CategoryFeedbackRequest,
    CategoryFeedbackResponse,
    CategoryStatsListResponse,
    CategoryStatsResponse,
    MergeCategoryRequest,
    MergeCategoryResponse,
    RenameCategoryRequest,
    RenameCategoryResponse,
)
from revcat.presentation.api.schemas.classifications import (
    ApproveClassificationRequest,
    ClassificationResponse,
    CorrectClassificationRequest,
    ReclassifyRequest,
    ReclassifyResponse,
)
from revcat.presentation.api.schemas.common import ErrorResponse, HealthResponse
from revcat.presentation.api.schemas.subscriptions import (
    SubscriptionCorrectionRequest,
    SubscriptionResponse,
    ToggleAuditRequest,
)

__all__ = [
    # Audit
    "AuditEntryListResponse",
    "AuditEntryResponse",
    # Categories
    "CategoryFeedbackRequest",
    "CategoryFeedbackResponse",
    "CategoryStatsListResponse",
    "CategoryStatsResponse",
    "MergeCategoryRequest",
    "MergeCategoryResponse",
    "RenameCategoryRequest",
    "RenameCategoryResponse",
    # Classifications
    "ApproveClassificationRequest",
    "ClassificationResponse",
    "CorrectClassificationRequest",
    "ReclassifyRequest",
    "ReclassifyResponse",
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Subscriptions
    "SubscriptionCorrectionRequest",
    "SubscriptionResponse",
    "ToggleAuditRequest",
]
