"""Subscription domain."""

from revcat.domain.subscription.entities import CORRECTABLE_ATTRIBUTES, Subscription
from revcat.domain.subscription.exceptions import SubscriptionNotFoundError
from revcat.domain.subscription.repositories import SubscriptionRepository

__all__ = [
    "CORRECTABLE_ATTRIBUTES",
    "Subscription",
    "SubscriptionNotFoundError",
    "SubscriptionRepository",
]
