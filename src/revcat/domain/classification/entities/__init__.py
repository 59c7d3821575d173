"""Classification domain entities."""

from revcat.domain.classification.entities.category_catalog_entry import (
    CategoryCatalogEntry,
)
from revcat.domain.classification.entities.line_item_classification import (
    LineItemClassification,
)

__all__ = [
    "CategoryCatalogEntry",
    "LineItemClassification",
]
