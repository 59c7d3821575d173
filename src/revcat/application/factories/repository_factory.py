"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from revcat.application.ports import CategoryStatsReadPort
from revcat.domain.audit.repositories import AuditEntryRepository
from revcat.domain.classification.repositories import (
    CategoryCatalogRepository,
    LineItemClassificationRepository,
)
from revcat.domain.subscription.repositories import SubscriptionRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def classification_repository(self) -> LineItemClassificationRepository:
        """Get line-item classification repository."""
        ...

    def category_catalog_repository(self) -> CategoryCatalogRepository:
        """Get category catalog repository."""
        ...

    def subscription_repository(self) -> SubscriptionRepository:
        """Get subscription repository."""
        ...

    def audit_entry_repository(self) -> AuditEntryRepository:
        """Get audit entry repository."""
        ...

    def category_stats_read_port(self) -> CategoryStatsReadPort:
        """Get category statistics read port."""
        ...
