"""SQLAlchemy models for persistence layer."""

from revcat.infrastructure.persistence.sqlalchemy.models.audit_entry_model import (
    AuditEntryModel,
)
from revcat.infrastructure.persistence.sqlalchemy.models.base import Base
from revcat.infrastructure.persistence.sqlalchemy.models.category_catalog_model import (
    CategoryCatalogModel,
)
from revcat.infrastructure.persistence.sqlalchemy.models.coverage_candidate_model import (
    CoverageCandidateModel,
)
from revcat.infrastructure.persistence.sqlalchemy.models.line_item_classification_model import (  # NOQA: E501
    LineItemClassificationModel,
)
from revcat.infrastructure.persistence.sqlalchemy.models.subscription_model import (
    SubscriptionModel,
)

__all__ = [
    "AuditEntryModel",
    "Base",
    "CategoryCatalogModel",
    "CoverageCandidateModel",
    "LineItemClassificationModel",
    "SubscriptionModel",
]
