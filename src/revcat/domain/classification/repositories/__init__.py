"""Classification domain repository interfaces."""

from revcat.domain.classification.repositories.category_catalog_repository import (
    CategoryCatalogRepository,
)
from revcat.domain.classification.repositories.line_item_classification_repository import (  # NOQA: E501
    LineItemClassificationRepository,
)

__all__ = [
    "CategoryCatalogRepository",
    "LineItemClassificationRepository",
]
