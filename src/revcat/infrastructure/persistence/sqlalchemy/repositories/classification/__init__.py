"""Classification repositories."""

from revcat.infrastructure.persistence.sqlalchemy.repositories.classification.category_catalog_repository import (  # NOQA: E501
    CategoryCatalogRepositorySQLAlchemy,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.classification.line_item_classification_repository import (  # NOQA: E501
    LineItemClassificationRepositorySQLAlchemy,
)

__all__ = [
    "CategoryCatalogRepositorySQLAlchemy",
    "LineItemClassificationRepositorySQLAlchemy",
]
