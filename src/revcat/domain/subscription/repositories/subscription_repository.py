"""Repository interface for subscriptions."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from revcat.domain.subscription.entities import Subscription


class SubscriptionRepository(ABC):
    """Persistence of subscriptions. There is no delete."""

    @abstractmethod
    async def find_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """
        Find a subscription by ID.

        Returns
        -------
        Subscription if found, None otherwise
        """

    @abstractmethod
    async def save(self, subscription: Subscription) -> None:
        """Insert or update a subscription."""
