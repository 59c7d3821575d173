"""SQLAlchemy repository implementations organized by bounded context."""

from revcat.infrastructure.persistence.sqlalchemy.repositories.audit import (
    AuditEntryRepositorySQLAlchemy,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.classification import (
    CategoryCatalogRepositorySQLAlchemy,
    LineItemClassificationRepositorySQLAlchemy,
)

# Repository Factory
from revcat.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
    create_classifier_from_settings,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.subscription import (
    SubscriptionRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "create_classifier_from_settings",
    # Audit
    "AuditEntryRepositorySQLAlchemy",
    # Classification
    "CategoryCatalogRepositorySQLAlchemy",
    "LineItemClassificationRepositorySQLAlchemy",
    # Subscription
    "SubscriptionRepositorySQLAlchemy",
]
