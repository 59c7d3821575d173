"""AI classifiers for product categorization."""

from revcat.infrastructure.integration.ai.chat_completions_category_classifier import (
    ChatCompletionsCategoryClassifier,
)

__all__ = ["ChatCompletionsCategoryClassifier"]
