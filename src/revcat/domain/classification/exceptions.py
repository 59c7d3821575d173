"""Classification domain exceptions.

Covers lookups of classifications and catalog categories, the two ways the
external classifier can fail, and multi-step category operations that
stopped after part of their work was applied.
"""

from typing import Any, Optional
from uuid import UUID

from revcat.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class ClassificationNotFoundError(EntityNotFoundError):
    """Raised when a line-item classification cannot be found."""

    def __init__(self, classification_id: UUID) -> None:
        super().__init__(
            message=f"Classification not found: {classification_id}",
            code=ErrorCode.CLASSIFICATION_NOT_FOUND,
            details={"classification_id": str(classification_id)},
        )


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a merge target category does not exist for the customer."""

    def __init__(self, category_name: str, customer_id: UUID) -> None:
        super().__init__(
            message=f"Category '{category_name}' does not exist",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category": category_name, "customer_id": str(customer_id)},
        )


class DuplicateCategoryError(ConflictError):
    """Raised when a rename targets a category name that already exists."""

    def __init__(self, category_name: str) -> None:
        super().__init__(
            message=(
                f"Category '{category_name}' already exists. "
                "Merge the categories instead of renaming."
            ),
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"category": category_name},
        )


class ClassifierError(DomainException):
    """Base exception for failures of the external classifier."""


class ClassifierUnavailableError(ClassifierError):
    """The classifier endpoint could not be reached or answered non-2xx."""

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            message="The AI classifier is currently unavailable. Please try again.",
            code=ErrorCode.CLASSIFIER_UNAVAILABLE,
            details={"reason": reason, "status_code": status_code},
        )
        self.reason = reason
        self.status_code = status_code


class ClassifierContractViolationError(ClassifierError):
    """The classifier answered, but not with the required tool call."""

    def __init__(self, reason: str, raw_response: Any = None) -> None:
        super().__init__(
            message="Failed to process feedback. Please try again.",
            code=ErrorCode.CLASSIFIER_CONTRACT_VIOLATION,
            details={"reason": reason, "raw_response": raw_response},
        )
        self.reason = reason
        self.raw_response = raw_response


class CategoryOperationPartiallyAppliedError(DomainException):
    """A rename or merge failed after records were already reassigned.

    The applied steps stay in place; nothing is rolled back.
    """

    def __init__(
        self,
        operation: str,
        failed_step: str,
        applied_steps: list[str],
        affected_count: int,
    ) -> None:
        super().__init__(
            message=(
                f"Category {operation} partially applied: {affected_count} "
                f"records were updated but the step '{failed_step}' failed"
            ),
            code=ErrorCode.PARTIAL_OPERATION,
            details={
                "operation": operation,
                "failed_step": failed_step,
                "applied_steps": applied_steps,
                "affected_count": affected_count,
            },
        )
        self.operation = operation
        self.failed_step = failed_step
        self.applied_steps = applied_steps
        self.affected_count = affected_count
