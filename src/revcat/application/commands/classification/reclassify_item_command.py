"""Reclassify a single PRPC from analyst feedback."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from revcat.application.dtos import ReclassificationResult
from revcat.application.services import ClassificationUpdateApplier
from revcat.domain.classification.exceptions import ClassificationNotFoundError
from revcat.domain.shared.exceptions import ErrorCode, ValidationError
from revcat.infrastructure.persistence.sqlalchemy.repositories.factory import (
    create_classifier_from_settings,
)

if TYPE_CHECKING:
    from uuid import UUID

    from revcat.application.factories import RepositoryFactory
    from revcat.domain.classification.repositories import (
        LineItemClassificationRepository,
    )
    from revcat.domain.classification.services import CategoryClassifier

logger = logging.getLogger(__name__)


class ReclassifyItemCommand:
    """Send one classification and the analyst's objection to the classifier."""

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        classifier: CategoryClassifier,
        applier: ClassificationUpdateApplier,
    ):
        self._classification_repo = classification_repository
        self._classifier = classifier
        self._applier = applier

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        classifier: Optional[CategoryClassifier] = None,
    ) -> ReclassifyItemCommand:
        return cls(
            classification_repository=factory.classification_repository(),
            classifier=classifier or create_classifier_from_settings(),
            applier=ClassificationUpdateApplier.from_factory(factory),
        )

    async def execute(
        self,
        classification_id: UUID,
        feedback: str,
        reviewer_id: UUID,
    ) -> ReclassificationResult:
        if not feedback or not feedback.strip():
            msg = "Feedback cannot be empty"
            raise ValidationError(msg, code=ErrorCode.EMPTY_FEEDBACK)
        feedback = feedback.strip()

        classification = await self._classification_repo.find_by_id(classification_id)
        if classification is None:
            raise ClassificationNotFoundError(classification_id)

        before = classification.snapshot()

        classification.mark_processing()
        await self._classification_repo.save(classification)

        decision = await self._classifier.reclassify_item(classification, feedback)

        await self._applier.apply_reclassification(
            classification=classification,
            decision=decision,
            feedback=feedback,
            reviewer_id=reviewer_id,
            before=before,
            source_agent=self._classifier.model_name,
        )

        return ReclassificationResult(
            classification=classification,
            xp_earned=decision.xp_earned,
            revenue_recognition_timing=decision.revenue_recognition_timing.value,
            amortization_technique=decision.amortization_technique.value,
        )
