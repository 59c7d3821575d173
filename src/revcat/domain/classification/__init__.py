"""Classification domain: PRPC categories, catalog, matching and classifier port."""

from revcat.domain.classification.entities import (
    CategoryCatalogEntry,
    LineItemClassification,
)
from revcat.domain.classification.services import (
    CategoryClassifier,
    ClassificationMatcher,
)
from revcat.domain.classification.value_objects import (
    CategoryFeedbackDecision,
    ClassificationStatus,
    FeedbackRequest,
    MatchResult,
    ReclassificationDecision,
)

__all__ = [
    # Entities
    "CategoryCatalogEntry",
    "LineItemClassification",
    # Services & Interfaces
    "CategoryClassifier",
    "ClassificationMatcher",
    # Value Objects
    "CategoryFeedbackDecision",
    "ClassificationStatus",
    "FeedbackRequest",
    "MatchResult",
    "ReclassificationDecision",
]
