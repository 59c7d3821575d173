"""Line-item (PRPC) classification entity."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from revcat.domain.classification.value_objects import ClassificationStatus
from revcat.domain.shared.exceptions import ErrorCode, ValidationError
from revcat.domain.shared.time import utc_now


class LineItemClassification:
    """
    Inferred revenue category for one Product / Rate-Plan / Charge triple.

    Owned by exactly one customer. The category is a soft reference to the
    category catalog by name, so renames rewrite every referencing row.
    """

    def __init__(  # noqa: PLR0913
        self,
        customer_id: UUID,
        prpc_id: str,
        product_name: str,
        rate_plan_name: str,
        charge_name: str,
        inferred_category: Optional[str] = None,
        inferred_pattern_of_business: Optional[str] = None,
        confidence: Optional[float] = None,
        status: ClassificationStatus = ClassificationStatus.INFERRED,
        rationale: Optional[str] = None,
        conflict_flags: Optional[Iterable[str]] = None,
        needs_review: bool = False,
        source_agent: Optional[str] = None,
        last_reviewed_by: Optional[UUID] = None,
        last_reviewed_at: Optional[datetime] = None,
        # For reconstitution from persistence:
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._customer_id = customer_id
        self._prpc_id = prpc_id
        self._product_name = product_name
        self._rate_plan_name = rate_plan_name
        self._charge_name = charge_name
        self._inferred_category = inferred_category
        self._inferred_pattern_of_business = inferred_pattern_of_business
        self._confidence = confidence
        self._status = status
        self._rationale = rationale
        self._conflict_flags = frozenset(conflict_flags or ())
        self._needs_review = needs_review
        self._source_agent = source_agent
        self._last_reviewed_by = last_reviewed_by
        self._last_reviewed_at = last_reviewed_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        self._validate()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def customer_id(self) -> UUID:
        return self._customer_id

    @property
    def prpc_id(self) -> str:
        return self._prpc_id

    @property
    def product_name(self) -> str:
        return self._product_name

    @property
    def rate_plan_name(self) -> str:
        return self._rate_plan_name

    @property
    def charge_name(self) -> str:
        return self._charge_name

    @property
    def inferred_category(self) -> Optional[str]:
        return self._inferred_category

    @property
    def inferred_pattern_of_business(self) -> Optional[str]:
        return self._inferred_pattern_of_business

    @property
    def confidence(self) -> Optional[float]:
        return self._confidence

    @property
    def status(self) -> ClassificationStatus:
        return self._status

    @property
    def rationale(self) -> Optional[str]:
        return self._rationale

    @property
    def conflict_flags(self) -> frozenset[str]:
        return self._conflict_flags

    @property
    def needs_review(self) -> bool:
        return self._needs_review

    @property
    def source_agent(self) -> Optional[str]:
        return self._source_agent

    @property
    def last_reviewed_by(self) -> Optional[UUID]:
        return self._last_reviewed_by

    @property
    def last_reviewed_at(self) -> Optional[datetime]:
        return self._last_reviewed_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def prpc_label(self) -> str:
        """PRPC rendered the way the classifier prompt lists it."""
        return f"{self._product_name} - {self._rate_plan_name} - {self._charge_name}"

    def _validate(self) -> None:
        if not self._prpc_id:
            msg = "PRPC id cannot be empty"
            raise ValueError(msg)

        if self._confidence is not None and not 0.0 <= self._confidence <= 1.0:
            msg = f"Confidence must be between 0.0 and 1.0, got {self._confidence}"
            raise ValueError(msg)

    def name_contains(self, pattern: str) -> bool:
        """Case-insensitive substring test on product, rate plan and charge."""
        needle = pattern.lower()
        return (
            needle in self._product_name.lower()
            or needle in self._rate_plan_name.lower()
            or needle in self._charge_name.lower()
        )

    def snapshot(self) -> dict:
        """Before/after state recorded in audit entries."""
        return {
            "category": self._inferred_category,
            "pob": self._inferred_pattern_of_business,
            "rationale": self._rationale,
            "confidence": self._confidence,
            "status": self._status.value,
        }

    def mark_processing(self) -> None:
        self._transition_to(ClassificationStatus.PROCESSING)

    def reclassify(  # noqa: PLR0913
        self,
        category: str,
        pattern_of_business: Optional[str],
        rationale: Optional[str],
        reviewer_id: UUID,
        confidence: Optional[float] = None,
        source_agent: Optional[str] = None,
    ) -> None:
        if not category or not category.strip():
            msg = "Category cannot be empty"
            raise ValidationError(msg)
        if confidence is not None and not 0.0 <= confidence <= 1.0:
            msg = f"Confidence must be between 0.0 and 1.0, got {confidence}"
            raise ValidationError(msg)

        self._inferred_category = category.strip()
        self._inferred_pattern_of_business = pattern_of_business
        if rationale is not None:
            self._rationale = rationale
        if confidence is not None:
            self._confidence = confidence
        if source_agent is not None:
            self._source_agent = source_agent
        self._transition_to(ClassificationStatus.USER_ADJUSTED)
        self._stamp_reviewer(reviewer_id)

    def approve(self, reviewer_id: UUID) -> None:
        self._transition_to(ClassificationStatus.APPROVED)
        self._needs_review = False
        self._stamp_reviewer(reviewer_id)

    def _stamp_reviewer(self, reviewer_id: UUID) -> None:
        self._last_reviewed_by = reviewer_id
        self._last_reviewed_at = utc_now()
        self._updated_at = self._last_reviewed_at

    def _transition_to(self, status: ClassificationStatus) -> None:
        if status == ClassificationStatus.INFERRED:
            msg = "A classification cannot be moved back to 'inferred'"
            raise ValidationError(msg, code=ErrorCode.INVALID_STATUS_TRANSITION)
        self._status = status
        self._updated_at = utc_now()

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        customer_id: UUID,
        prpc_id: str,
        product_name: str,
        rate_plan_name: str,
        charge_name: str,
        inferred_category: Optional[str],
        inferred_pattern_of_business: Optional[str],
        confidence: Optional[float],
        status: ClassificationStatus,
        rationale: Optional[str],
        conflict_flags: Optional[Iterable[str]],
        needs_review: bool,
        source_agent: Optional[str],
        last_reviewed_by: Optional[UUID],
        last_reviewed_at: Optional[datetime],
        created_at: datetime,
        updated_at: datetime,
    ) -> LineItemClassification:
        return cls(
            customer_id=customer_id,
            prpc_id=prpc_id,
            product_name=product_name,
            rate_plan_name=rate_plan_name,
            charge_name=charge_name,
            inferred_category=inferred_category,
            inferred_pattern_of_business=inferred_pattern_of_business,
            confidence=confidence,
            status=status,
            rationale=rationale,
            conflict_flags=conflict_flags,
            needs_review=needs_review,
            source_agent=source_agent,
            last_reviewed_by=last_reviewed_by,
            last_reviewed_at=last_reviewed_at,
            id=id,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineItemClassification):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        category = self._inferred_category or "uncategorized"
        return f"LineItemClassification[{self._status.value}]: {self.prpc_label} -> {category}"
