"""Subscription domain repository interfaces."""

from revcat.domain.subscription.repositories.subscription_repository import (
    SubscriptionRepository,
)

__all__ = ["SubscriptionRepository"]
