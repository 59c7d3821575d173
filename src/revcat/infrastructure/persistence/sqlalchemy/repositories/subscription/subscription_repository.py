"""SQLAlchemy implementation of SubscriptionRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from revcat.domain.shared.time import ensure_tz_aware
from revcat.domain.subscription import Subscription, SubscriptionRepository
from revcat.infrastructure.persistence.sqlalchemy.models import SubscriptionModel
from revcat.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_data_errors,
)

logger = logging.getLogger(__name__)


class SubscriptionRepositorySQLAlchemy(SubscriptionRepository):
    """SQLAlchemy implementation of the subscription repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        async with translate_data_errors("load subscription"):
            model = await self._session.get(SubscriptionModel, subscription_id)
        return self._map_to_domain(model) if model else None

    async def save(self, subscription: Subscription) -> None:
        async with (
            translate_data_errors("save subscription"),
            self._session.begin_nested(),
        ):
            model = await self._session.get(SubscriptionModel, subscription.id)
            if model is None:
                logger.debug("Creating subscription: %s", subscription.subscription_id)
                model = SubscriptionModel(
                    id=subscription.id,
                    customer_id=subscription.customer_id,
                    created_at=subscription.created_at,
                )
                self._session.add(model)
            self._update_model_from_domain(model, subscription)

    @staticmethod
    def _update_model_from_domain(
        model: SubscriptionModel,
        subscription: Subscription,
    ) -> None:
        model.subscription_id = subscription.subscription_id
        model.billing_period = subscription.billing_period
        model.start_date = subscription.start_date
        model.end_date = subscription.end_date
        model.termed = subscription.termed
        model.evergreen = subscription.evergreen
        model.has_cancellation = subscription.has_cancellation
        model.has_ramps = subscription.has_ramps
        model.has_discounts = subscription.has_discounts
        model.currency = subscription.currency
        model.status = subscription.status
        model.confidence = subscription.confidence
        model.conflict_flags = sorted(subscription.conflict_flags)
        model.derivation_trace = subscription.derivation_trace
        model.audited = subscription.audited
        model.audited_by = subscription.audited_by
        model.audited_at = subscription.audited_at
        model.updated_at = subscription.updated_at

    @staticmethod
    def _map_to_domain(model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=model.id,
            customer_id=model.customer_id,
            subscription_id=model.subscription_id,
            billing_period=model.billing_period,
            start_date=model.start_date,
            end_date=model.end_date,
            termed=bool(model.termed),
            evergreen=bool(model.evergreen),
            has_cancellation=bool(model.has_cancellation),
            has_ramps=bool(model.has_ramps),
            has_discounts=bool(model.has_discounts),
            currency=model.currency,
            status=model.status,
            confidence=model.confidence,
            conflict_flags=model.conflict_flags or (),
            derivation_trace=model.derivation_trace or {},
            audited=bool(model.audited),
            audited_by=model.audited_by,
            audited_at=ensure_tz_aware(model.audited_at) if model.audited_at else None,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
