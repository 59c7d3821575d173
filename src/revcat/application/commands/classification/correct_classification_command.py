"""Manual reclassification and approval of a single PRPC."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from revcat.application.services import ClassificationUpdateApplier
from revcat.domain.audit import AuditAction, AuditEntry, ClassificationTarget
from revcat.domain.classification.exceptions import ClassificationNotFoundError
from revcat.domain.shared.exceptions import ErrorCode, ValidationError

if TYPE_CHECKING:
    from uuid import UUID

    from revcat.application.factories import RepositoryFactory
    from revcat.domain.audit.repositories import AuditEntryRepository
    from revcat.domain.classification.entities import LineItemClassification
    from revcat.domain.classification.repositories import (
        LineItemClassificationRepository,
    )

logger = logging.getLogger(__name__)


class CorrectClassificationCommand:
    """Set category and pattern of business by hand, with a reason."""

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        audit_repository: AuditEntryRepository,
        applier: ClassificationUpdateApplier,
    ):
        self._classification_repo = classification_repository
        self._audit_repo = audit_repository
        self._applier = applier

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CorrectClassificationCommand:
        return cls(
            classification_repository=factory.classification_repository(),
            audit_repository=factory.audit_entry_repository(),
            applier=ClassificationUpdateApplier.from_factory(factory),
        )

    async def execute(
        self,
        classification_id: UUID,
        category: str,
        pattern_of_business: str,
        reason: str,
        reviewer_id: UUID,
    ) -> LineItemClassification:
        missing = [
            name
            for name, value in (
                ("category", category),
                ("pattern_of_business", pattern_of_business),
                ("reason", reason),
            )
            if not value or not value.strip()
        ]
        if missing:
            msg = "Please fill in all fields"
            raise ValidationError(
                msg,
                code=ErrorCode.MISSING_SELECTION,
                details={"missing": missing},
            )

        classification = await _load(self._classification_repo, classification_id)
        before = classification.snapshot()

        await self._applier.ensure_category(classification.customer_id, category.strip())

        classification.reclassify(
            category=category,
            pattern_of_business=pattern_of_business.strip(),
            rationale=None,
            reviewer_id=reviewer_id,
        )
        await self._classification_repo.save(classification)

        await self._audit_repo.add(
            AuditEntry(
                actor=str(reviewer_id),
                action=AuditAction.RECLASSIFY,
                target=ClassificationTarget(classification.id, classification.customer_id),
                before_json={"category": before["category"], "pob": before["pob"]},
                after_json={
                    "category": classification.inferred_category,
                    "pob": classification.inferred_pattern_of_business,
                    "reason": reason.strip(),
                },
            ),
        )
        logger.info(
            "PRPC %s reclassified by hand: %s -> %s",
            classification.prpc_id,
            before["category"],
            classification.inferred_category,
        )
        return classification


class ApproveClassificationCommand:
    """Confirm a classification as correct."""

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        audit_repository: AuditEntryRepository,
    ):
        self._classification_repo = classification_repository
        self._audit_repo = audit_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ApproveClassificationCommand:
        return cls(
            classification_repository=factory.classification_repository(),
            audit_repository=factory.audit_entry_repository(),
        )

    async def execute(
        self,
        classification_id: UUID,
        reviewer_id: UUID,
    ) -> LineItemClassification:
        classification = await _load(self._classification_repo, classification_id)
        previous_status = classification.status.value

        classification.approve(reviewer_id)
        await self._classification_repo.save(classification)

        await self._audit_repo.add(
            AuditEntry(
                actor=str(reviewer_id),
                action=AuditAction.APPROVE,
                target=ClassificationTarget(classification.id, classification.customer_id),
                before_json={"status": previous_status},
                after_json={
                    "status": classification.status.value,
                    "category": classification.inferred_category,
                },
            ),
        )
        logger.info("PRPC %s approved", classification.prpc_id)
        return classification


async def _load(
    repository: LineItemClassificationRepository,
    classification_id: UUID,
) -> LineItemClassification:
    classification = await repository.find_by_id(classification_id)
    if classification is None:
        raise ClassificationNotFoundError(classification_id)
    return classification
