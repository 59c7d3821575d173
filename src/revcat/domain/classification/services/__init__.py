"""Classification domain services and ports."""

from revcat.domain.classification.services.category_classifier import (
    PROMPT_SAMPLE_SIZE,
    CategoryClassifier,
)
from revcat.domain.classification.services.classification_matcher import (
    MAX_CANDIDATES,
    ClassificationMatcher,
)

__all__ = [
    "MAX_CANDIDATES",
    "PROMPT_SAMPLE_SIZE",
    "CategoryClassifier",
    "ClassificationMatcher",
]
