"""Subscription repositories."""

from revcat.infrastructure.persistence.sqlalchemy.repositories.subscription.subscription_repository import (  # NOQA: E501
    SubscriptionRepositorySQLAlchemy,
)

__all__ = ["SubscriptionRepositorySQLAlchemy"]
