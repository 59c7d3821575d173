"""Feedback request and match result value objects."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from revcat.domain.shared.exceptions import ErrorCode, ValidationError

LOW_CONFIDENCE_THRESHOLD = 0.4
MEDIUM_CONFIDENCE_THRESHOLD = 0.7


@dataclass(frozen=True)
class FeedbackRequest:
    """Analyst feedback about a slice of a customer's classifications.

    Not persisted. scope_category narrows candidates to one category;
    low_confidence_only narrows them further to confidence below
    LOW_CONFIDENCE_THRESHOLD.
    """

    free_text: str
    customer_id: UUID
    scope_category: Optional[str] = None
    low_confidence_only: bool = False

    def __post_init__(self) -> None:
        if not self.free_text or not self.free_text.strip():
            msg = "Please enter your feedback"
            raise ValidationError(msg, code=ErrorCode.EMPTY_FEEDBACK)
        object.__setattr__(self, "free_text", self.free_text.strip())
        if self.scope_category is not None and not self.scope_category.strip():
            object.__setattr__(self, "scope_category", None)

    @property
    def is_bulk_slice_update(self) -> bool:
        """Whole reviewed slice is updated regardless of pattern."""
        return self.low_confidence_only and self.scope_category is not None


@dataclass(frozen=True)
class MatchResult:
    """Classification ids selected for mutation, in stable order."""

    ids: tuple[UUID, ...]

    @property
    def count(self) -> int:
        return len(self.ids)

    @property
    def is_empty(self) -> bool:
        return not self.ids
