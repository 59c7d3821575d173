"""Classification domain value objects."""

from revcat.domain.classification.value_objects.classification_decision import (
    AmortizationTechnique,
    CategoryFeedbackDecision,
    ReclassificationDecision,
    RevenueRecognitionTiming,
)
from revcat.domain.classification.value_objects.classification_status import (
    ClassificationStatus,
)
from revcat.domain.classification.value_objects.feedback_request import (
    LOW_CONFIDENCE_THRESHOLD,
    MEDIUM_CONFIDENCE_THRESHOLD,
    FeedbackRequest,
    MatchResult,
)
from revcat.domain.classification.value_objects.product_category import (
    PRODUCT_CATEGORIES,
    PRODUCT_CATEGORY_NAMES,
    ProductCategory,
    numbered_category_list,
)

__all__ = [
    # Classifier decisions
    "AmortizationTechnique",
    "CategoryFeedbackDecision",
    "ReclassificationDecision",
    "RevenueRecognitionTiming",
    # Status
    "ClassificationStatus",
    # Matching
    "LOW_CONFIDENCE_THRESHOLD",
    "MEDIUM_CONFIDENCE_THRESHOLD",
    "FeedbackRequest",
    "MatchResult",
    # Taxonomy
    "PRODUCT_CATEGORIES",
    "PRODUCT_CATEGORY_NAMES",
    "ProductCategory",
    "numbered_category_list",
]
