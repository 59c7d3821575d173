"""Turn free-text analyst feedback into a bulk category change."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from revcat.application.dtos import CategoryFeedbackResult
from revcat.application.services import ClassificationUpdateApplier
from revcat.domain.audit import SYSTEM_ACTOR
from revcat.domain.classification.services import ClassificationMatcher
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
    from revcat.domain.classification.value_objects import FeedbackRequest

logger = logging.getLogger(__name__)


class SubmitCategoryFeedbackCommand:
    """Ask the classifier how to recategorise, then apply it to the matches.

    Round trips in order: candidate fetch, classifier call, record update,
    audit insert. A classifier failure aborts before anything is written.
    """

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        classifier: CategoryClassifier,
        applier: ClassificationUpdateApplier,
        matcher: Optional[ClassificationMatcher] = None,
    ):
        self._classification_repo = classification_repository
        self._classifier = classifier
        self._applier = applier
        self._matcher = matcher or ClassificationMatcher()

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        classifier: Optional[CategoryClassifier] = None,
    ) -> SubmitCategoryFeedbackCommand:
        return cls(
            classification_repository=factory.classification_repository(),
            classifier=classifier or create_classifier_from_settings(),
            applier=ClassificationUpdateApplier.from_factory(factory),
        )

    async def execute(
        self,
        request: FeedbackRequest,
        actor_id: Optional[UUID] = None,
    ) -> CategoryFeedbackResult:
        candidates = await self._classification_repo.find_candidates(
            request.customer_id,
            category=request.scope_category,
            low_confidence_only=request.low_confidence_only,
        )
        logger.debug(
            "Feedback for customer %s: %d candidates (scope=%s, low_only=%s)",
            request.customer_id,
            len(candidates),
            request.scope_category,
            request.low_confidence_only,
        )

        decision = await self._classifier.classify_feedback(
            request.free_text,
            candidates,
            current_category=request.scope_category,
        )

        match = self._matcher.match(candidates, decision.pattern_to_match, request)

        updated_count = await self._applier.apply_feedback(
            customer_id=request.customer_id,
            match=match,
            candidates=candidates,
            decision=decision,
            actor=str(actor_id) if actor_id else SYSTEM_ACTOR,
        )

        return CategoryFeedbackResult(
            updated_count=updated_count,
            new_category=decision.new_category,
            rationale=decision.rationale,
            pattern=decision.pattern_to_match,
            updated_ids=list(match.ids),
        )
