"""Analyst review of inferred subscription attributes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from revcat.domain.audit import AuditAction, AuditEntry, SubscriptionTarget
from revcat.domain.shared.exceptions import ValidationError
from revcat.domain.subscription import SubscriptionNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from revcat.application.factories import RepositoryFactory
    from revcat.domain.audit.repositories import AuditEntryRepository
    from revcat.domain.subscription import Subscription, SubscriptionRepository

logger = logging.getLogger(__name__)


class _SubscriptionCommand:
    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        audit_repository: AuditEntryRepository,
    ):
        self._subscription_repo = subscription_repository
        self._audit_repo = audit_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory):
        return cls(
            subscription_repository=factory.subscription_repository(),
            audit_repository=factory.audit_entry_repository(),
        )

    async def _load(self, subscription_id: UUID) -> Subscription:
        subscription = await self._subscription_repo.find_by_id(subscription_id)
        if subscription is None:
            raise SubscriptionNotFoundError(subscription_id)
        return subscription


class ToggleSubscriptionAuditCommand(_SubscriptionCommand):
    """Flip the audited flag of a subscription."""

    async def execute(self, subscription_id: UUID, actor_id: UUID) -> Subscription:
        subscription = await self._load(subscription_id)
        was_audited = subscription.audited

        subscription.toggle_audited(actor_id)
        await self._subscription_repo.save(subscription)

        await self._audit_repo.add(
            AuditEntry(
                actor=str(actor_id),
                action=AuditAction.TOGGLE_AUDIT,
                target=SubscriptionTarget(subscription.id, subscription.customer_id),
                before_json={"audited": was_audited},
                after_json={"audited": subscription.audited},
            ),
        )
        logger.info(
            "Subscription %s marked %s",
            subscription.subscription_id,
            "audited" if subscription.audited else "not audited",
        )
        return subscription


class ProposeSubscriptionCorrectionCommand(_SubscriptionCommand):
    """Correct inferred billing attributes, with a mandatory reason."""

    async def execute(
        self,
        subscription_id: UUID,
        attributes: dict[str, Any],
        reason: str,
        actor_id: UUID,
    ) -> Subscription:
        if not reason or not reason.strip():
            msg = "Please provide a reason for the correction"
            raise ValidationError(msg)

        subscription = await self._load(subscription_id)
        before = subscription.attribute_values(attributes)

        subscription.apply_correction(attributes)
        await self._subscription_repo.save(subscription)

        await self._audit_repo.add(
            AuditEntry(
                actor=str(actor_id),
                action=AuditAction.PROPOSE_CORRECTION,
                target=SubscriptionTarget(subscription.id, subscription.customer_id),
                before_json=before,
                after_json={
                    **subscription.attribute_values(attributes),
                    "reason": reason.strip(),
                },
            ),
        )
        logger.info(
            "Correction applied to subscription %s: %s",
            subscription.subscription_id,
            ", ".join(sorted(attributes)),
        )
        return subscription
