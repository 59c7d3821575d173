"""SQLAlchemy implementation of LineItemClassificationRepository."""

from __future__ import annotations

import logging
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from revcat.domain.classification.entities import LineItemClassification
from revcat.domain.classification.repositories import LineItemClassificationRepository
from revcat.domain.classification.services import MAX_CANDIDATES
from revcat.domain.classification.value_objects import (
    LOW_CONFIDENCE_THRESHOLD,
    ClassificationStatus,
)
from revcat.domain.shared.time import ensure_tz_aware, utc_now
from revcat.infrastructure.persistence.sqlalchemy.models import (
    LineItemClassificationModel,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_data_errors,
)

logger = logging.getLogger(__name__)

Model = LineItemClassificationModel


class LineItemClassificationRepositorySQLAlchemy(LineItemClassificationRepository):
    """SQLAlchemy implementation of the classification repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(
        self,
        classification_id: UUID,
    ) -> Optional[LineItemClassification]:
        async with translate_data_errors("load classification"):
            model = await self._session.get(Model, classification_id)
        return self._map_to_domain(model) if model else None

    async def find_candidates(
        self,
        customer_id: UUID,
        category: Optional[str] = None,
        low_confidence_only: bool = False,
        limit: int = MAX_CANDIDATES,
    ) -> list[LineItemClassification]:
        stmt = select(Model).where(Model.customer_id == customer_id)
        if category is not None:
            stmt = stmt.where(Model.inferred_category == category)
        if low_confidence_only:
            stmt = stmt.where(
                Model.confidence.is_not(None),
                Model.confidence < LOW_CONFIDENCE_THRESHOLD,
            )
        stmt = self._ordered(stmt).limit(limit)

        async with translate_data_errors("fetch candidate classifications"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        if len(models) == limit:
            logger.warning(
                "Candidate set for customer %s truncated at %d records",
                customer_id,
                limit,
            )
        return [self._map_to_domain(m) for m in models]

    async def find_by_category(
        self,
        customer_id: UUID,
        category: str,
    ) -> list[LineItemClassification]:
        stmt = self._ordered(
            select(Model).where(
                Model.customer_id == customer_id,
                Model.inferred_category == category,
            ),
        )
        async with translate_data_errors("fetch classifications by category"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(m) for m in models]

    async def count_by_category(self, customer_id: UUID, category: str) -> int:
        stmt = select(func.count(Model.id)).where(
            Model.customer_id == customer_id,
            Model.inferred_category == category,
        )
        async with translate_data_errors("count classifications"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def save(self, classification: LineItemClassification) -> None:
        async with (
            translate_data_errors("save classification"),
            self._session.begin_nested(),
        ):
            model = await self._session.get(Model, classification.id)
            if model:
                logger.debug("Updating classification: %s", classification.prpc_id)
                self._update_model_from_domain(model, classification)
            else:
                logger.debug("Creating classification: %s", classification.prpc_id)
                model = Model(id=classification.id, customer_id=classification.customer_id)
                self._update_model_from_domain(model, classification)
                model.created_at = classification.created_at
                self._session.add(model)

    async def bulk_update_category(
        self,
        classification_ids: Sequence[UUID],
        category: str,
        rationale: Optional[str] = None,
    ) -> int:
        if not classification_ids:
            return 0

        values = {
            "inferred_category": category,
            "status": ClassificationStatus.USER_ADJUSTED.value,
            "updated_at": utc_now(),
        }
        if rationale is not None:
            values["rationale"] = rationale

        stmt = update(Model).where(Model.id.in_(list(classification_ids))).values(**values)

        async with (
            translate_data_errors("update classifications"),
            self._session.begin_nested(),
        ):
            result = await self._session.execute(stmt)

        logger.debug("Bulk update set %d rows to '%s'", result.rowcount, category)
        return result.rowcount

    @staticmethod
    def _ordered(stmt):
        return stmt.order_by(
            Model.product_name,
            Model.rate_plan_name,
            Model.charge_name,
            Model.id,
        )

    @staticmethod
    def _update_model_from_domain(
        model: LineItemClassificationModel,
        classification: LineItemClassification,
    ) -> None:
        model.prpc_id = classification.prpc_id
        model.product_name = classification.product_name
        model.rate_plan_name = classification.rate_plan_name
        model.charge_name = classification.charge_name
        model.inferred_category = classification.inferred_category
        model.inferred_pattern_of_business = classification.inferred_pattern_of_business
        model.confidence = classification.confidence
        model.status = classification.status.value
        model.rationale = classification.rationale
        model.conflict_flags = sorted(classification.conflict_flags)
        model.needs_review = classification.needs_review
        model.source_agent = classification.source_agent
        model.last_reviewed_by = classification.last_reviewed_by
        model.last_reviewed_at = classification.last_reviewed_at
        model.updated_at = classification.updated_at

    @staticmethod
    def _map_to_domain(model: LineItemClassificationModel) -> LineItemClassification:
        return LineItemClassification.reconstitute(
            id=model.id,
            customer_id=model.customer_id,
            prpc_id=model.prpc_id,
            product_name=model.product_name,
            rate_plan_name=model.rate_plan_name,
            charge_name=model.charge_name,
            inferred_category=model.inferred_category,
            inferred_pattern_of_business=model.inferred_pattern_of_business,
            confidence=model.confidence,
            status=ClassificationStatus(model.status),
            rationale=model.rationale,
            conflict_flags=model.conflict_flags or (),
            needs_review=bool(model.needs_review),
            source_agent=model.source_agent,
            last_reviewed_by=model.last_reviewed_by,
            last_reviewed_at=(
                ensure_tz_aware(model.last_reviewed_at)
                if model.last_reviewed_at
                else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
