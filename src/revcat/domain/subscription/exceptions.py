"""Subscription domain exceptions."""

from uuid import UUID

from revcat.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class SubscriptionNotFoundError(EntityNotFoundError):
    """Raised when a subscription cannot be found."""

    def __init__(self, subscription_id: UUID) -> None:
        super().__init__(
            message=f"Subscription not found: {subscription_id}",
            code=ErrorCode.SUBSCRIPTION_NOT_FOUND,
            details={"subscription_id": str(subscription_id)},
        )
