"""Subscriptions router: audit flag and attribute corrections."""

import logging
from uuid import UUID

from fastapi import APIRouter

from revcat.application.commands.subscription import (
    ProposeSubscriptionCorrectionCommand,
    ToggleSubscriptionAuditCommand,
)
from revcat.presentation.api.dependencies import RepoFactory
from revcat.presentation.api.schemas.subscriptions import (
    SubscriptionCorrectionRequest,
    SubscriptionResponse,
    ToggleAuditRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{subscription_id}/audit",
    summary="Toggle the audited flag",
    responses={
        200: {"description": "Flag toggled"},
        404: {"description": "Subscription not found"},
    },
)
async def toggle_subscription_audit(
    subscription_id: UUID,
    request: ToggleAuditRequest,
    factory: RepoFactory,
) -> SubscriptionResponse:
    command = ToggleSubscriptionAuditCommand.from_factory(factory)

    try:
        subscription = await command.execute(subscription_id, request.actor_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SubscriptionResponse.from_entity(subscription)


@router.post(
    "/{subscription_id}/corrections",
    summary="Correct inferred billing attributes",
    responses={
        200: {"description": "Correction applied"},
        400: {"description": "Missing reason or invalid attribute"},
        404: {"description": "Subscription not found"},
    },
)
async def propose_subscription_correction(
    subscription_id: UUID,
    request: SubscriptionCorrectionRequest,
    factory: RepoFactory,
) -> SubscriptionResponse:
    """
    Patch one or more of: termed, evergreen, has_cancellation, has_ramps,
    has_discounts, billing_period, currency, status, start_date, end_date.
    """
    command = ProposeSubscriptionCorrectionCommand.from_factory(factory)

    try:
        subscription = await command.execute(
            subscription_id=subscription_id,
            attributes=request.attributes,
            reason=request.reason,
            actor_id=request.actor_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SubscriptionResponse.from_entity(subscription)
