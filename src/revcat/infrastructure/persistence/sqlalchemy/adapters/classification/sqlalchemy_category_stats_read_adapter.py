"""SQLAlchemy implementation of CategoryStatsReadPort.

Rows are fetched with only the columns needed and aggregated in Python,
which keeps the adapter portable across SQLite and Postgres. JSON array
membership (coverage candidates) has no portable SQL form either.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revcat.application.dtos import CategoryStats, CategoryStatsResult
from revcat.domain.classification.value_objects import (
    LOW_CONFIDENCE_THRESHOLD,
    MEDIUM_CONFIDENCE_THRESHOLD,
    ClassificationStatus,
)
from revcat.infrastructure.persistence.sqlalchemy.models import (
    CoverageCandidateModel,
    LineItemClassificationModel,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_data_errors,
)


@dataclass
class _Accumulator:
    prpc_count: int = 0
    approved_count: int = 0
    needs_review_count: int = 0
    confidences: list[float] = field(default_factory=list)
    low: int = 0
    medium: int = 0
    high: int = 0
    subscriptions: set = field(default_factory=set)

    def add_confidence(self, confidence: Optional[float]) -> None:
        if confidence is None:
            return
        self.confidences.append(confidence)
        if confidence < LOW_CONFIDENCE_THRESHOLD:
            self.low += 1
        elif confidence < MEDIUM_CONFIDENCE_THRESHOLD:
            self.medium += 1
        else:
            self.high += 1


class SqlAlchemyCategoryStatsReadAdapter:
    """Per-category statistics over classifications and coverage candidates."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def category_stats(self, *, customer_id: UUID) -> CategoryStatsResult:
        classification_stmt = select(
            LineItemClassificationModel.inferred_category,
            LineItemClassificationModel.confidence,
            LineItemClassificationModel.status,
            LineItemClassificationModel.needs_review,
        ).where(
            LineItemClassificationModel.customer_id == customer_id,
            LineItemClassificationModel.inferred_category.is_not(None),
        )
        coverage_stmt = select(
            CoverageCandidateModel.subscription_id,
            CoverageCandidateModel.covers_product_categories,
        ).where(CoverageCandidateModel.customer_id == customer_id)

        async with translate_data_errors("compute category statistics"):
            classification_rows = (await self._session.execute(classification_stmt)).all()
            coverage_rows = (await self._session.execute(coverage_stmt)).all()

        stats: dict[str, _Accumulator] = defaultdict(_Accumulator)

        for category, confidence, status, needs_review in classification_rows:
            acc = stats[category]
            acc.prpc_count += 1
            if status == ClassificationStatus.APPROVED.value:
                acc.approved_count += 1
            if needs_review:
                acc.needs_review_count += 1
            acc.add_confidence(confidence)

        for subscription_id, categories in coverage_rows:
            for category in categories or ():
                stats[category].subscriptions.add(subscription_id)

        return CategoryStatsResult(
            customer_id=customer_id,
            categories=[
                self._to_dto(category, stats[category]) for category in sorted(stats)
            ],
        )

    @staticmethod
    def _to_dto(category: str, acc: _Accumulator) -> CategoryStats:
        avg_confidence = (
            round(sum(acc.confidences) / len(acc.confidences), 4)
            if acc.confidences
            else None
        )
        approval_rate = (
            round(acc.approved_count / acc.prpc_count, 4) if acc.prpc_count else 0.0
        )
        return CategoryStats(
            category=category,
            prpc_count=acc.prpc_count,
            subscription_count=len(acc.subscriptions),
            avg_confidence=avg_confidence,
            approval_rate=approval_rate,
            needs_review_count=acc.needs_review_count,
            low_confidence_count=acc.low,
            medium_confidence_count=acc.medium,
            high_confidence_count=acc.high,
        )
