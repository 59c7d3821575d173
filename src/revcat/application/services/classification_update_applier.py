"""Apply validated classifier decisions to stored classifications."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Sequence

from revcat.domain.audit import (
    SYSTEM_ACTOR,
    AuditAction,
    AuditEntry,
    ClassificationTarget,
)
from revcat.domain.classification.entities import (
    CategoryCatalogEntry,
    LineItemClassification,
)
from revcat.domain.classification.value_objects import (
    CategoryFeedbackDecision,
    ClassificationStatus,
    MatchResult,
    ReclassificationDecision,
)

if TYPE_CHECKING:
    from uuid import UUID

    from revcat.application.factories import RepositoryFactory
    from revcat.domain.audit.repositories import AuditEntryRepository
    from revcat.domain.classification.repositories import (
        CategoryCatalogRepository,
        LineItemClassificationRepository,
    )

logger = logging.getLogger(__name__)


class ClassificationUpdateApplier:
    """Writes classifier decisions and their provenance.

    Order per operation: catalog bootstrap, record update, audit entries.
    Audit entries are only written once the record update has succeeded,
    so a failed update leaves no trace in the audit trail.
    """

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        catalog_repository: CategoryCatalogRepository,
        audit_repository: AuditEntryRepository,
    ):
        self._classification_repo = classification_repository
        self._catalog_repo = catalog_repository
        self._audit_repo = audit_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ClassificationUpdateApplier:
        return cls(
            classification_repository=factory.classification_repository(),
            catalog_repository=factory.category_catalog_repository(),
            audit_repository=factory.audit_entry_repository(),
        )

    async def ensure_category(self, customer_id: UUID, category: str) -> bool:
        """Insert the category into the customer's catalog if it is missing.

        Returns True when a new entry was inserted. A concurrent insert of
        the same name counts as success.
        """
        existing = await self._catalog_repo.find_visible(customer_id, category)
        if existing is not None:
            return False

        inserted = await self._catalog_repo.add(
            CategoryCatalogEntry.for_customer(customer_id, category),
        )
        if inserted:
            logger.info(
                "Added category '%s' to catalog of customer %s",
                category,
                customer_id,
            )
        else:
            logger.debug("Category '%s' was inserted concurrently", category)
        return inserted

    async def apply_feedback(  # NOQA: PLR0913
        self,
        customer_id: UUID,
        match: MatchResult,
        candidates: Sequence[LineItemClassification],
        decision: CategoryFeedbackDecision,
        actor: str = SYSTEM_ACTOR,
    ) -> int:
        """Reassign every matched classification in one batched update.

        Reviewer fields are not stamped on this path. Returns the number
        of updated records.
        """
        if match.is_empty:
            logger.info(
                "Pattern '%s' matched no classifications, nothing to update",
                decision.pattern_to_match,
            )
            return 0

        await self.ensure_category(customer_id, decision.new_category)

        updated_count = await self._classification_repo.bulk_update_category(
            match.ids,
            decision.new_category,
            rationale=decision.rationale,
        )

        by_id = {c.id: c for c in candidates}
        entries = [
            AuditEntry(
                actor=actor,
                action=AuditAction.CATEGORY_FEEDBACK,
                target=ClassificationTarget(classification_id, customer_id),
                before_json=self._feedback_before(by_id.get(classification_id)),
                after_json={
                    "category": decision.new_category,
                    "status": ClassificationStatus.USER_ADJUSTED.value,
                    "rationale": decision.rationale,
                    "pattern": decision.pattern_to_match,
                },
            )
            for classification_id in match.ids
        ]
        await self._audit_repo.add_many(entries)

        logger.info(
            "Applied feedback to %d classifications of customer %s: -> %s",
            updated_count,
            customer_id,
            decision.new_category,
        )
        return updated_count

    async def apply_reclassification(  # NOQA: PLR0913
        self,
        classification: LineItemClassification,
        decision: ReclassificationDecision,
        feedback: str,
        reviewer_id: UUID,
        before: dict[str, Any],
        source_agent: str | None = None,
    ) -> None:
        """Store the classifier's decision for a single classification.

        `before` is the snapshot taken before the record was marked as
        processing.
        """
        await self.ensure_category(classification.customer_id, decision.category)

        classification.reclassify(
            category=decision.category,
            pattern_of_business=decision.pattern_of_business,
            rationale=decision.rationale,
            reviewer_id=reviewer_id,
            confidence=decision.confidence,
            source_agent=source_agent,
        )
        await self._classification_repo.save(classification)

        await self._audit_repo.add(
            AuditEntry(
                actor=str(reviewer_id),
                action=AuditAction.AI_RECLASSIFY,
                target=ClassificationTarget(
                    classification.id,
                    classification.customer_id,
                ),
                before_json={
                    "category": before.get("category"),
                    "pob": before.get("pob"),
                    "rationale": before.get("rationale"),
                },
                after_json={
                    "category": decision.category,
                    "pob": decision.pattern_of_business,
                    "rationale": decision.rationale,
                    "confidence": decision.confidence,
                    "revenue_recognition_timing": (
                        decision.revenue_recognition_timing.value
                    ),
                    "amortization_technique": decision.amortization_technique.value,
                    "feedback": feedback,
                },
            ),
        )

        logger.info(
            "Reclassified %s as '%s' (confidence %.2f)",
            classification.prpc_id,
            decision.category,
            decision.confidence,
        )

    @staticmethod
    def _feedback_before(
        classification: LineItemClassification | None,
    ) -> dict[str, Any]:
        if classification is None:
            return {}
        return {
            "category": classification.inferred_category,
            "status": classification.status.value,
            "rationale": classification.rationale,
        }
