"""Closed product category taxonomy offered to the external classifier."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductCategory:
    """A category the classifier is allowed to choose from."""

    name: str
    description: str

    @property
    def prompt_label(self) -> str:
        return f"{self.name} ({self.description})"


# Order matters: the prompt numbers categories in this order.
PRODUCT_CATEGORIES: tuple[ProductCategory, ...] = (
    ProductCategory("SaaS", "Software as a Service"),
    ProductCategory("Hardware", "Physical products"),
    ProductCategory("Hardware One Time", "One-time hardware purchases"),
    ProductCategory("Tech", "Technology products/services"),
    ProductCategory("Hybrid", "Combination of multiple types"),
    ProductCategory("Services", "Professional services"),
    ProductCategory("Consulting", "Consulting services"),
    ProductCategory("Support", "Support services"),
    ProductCategory("Training", "Training/education services"),
    ProductCategory("Tiered", "Tiered pricing model"),
    ProductCategory("Freemium", "Freemium pricing model"),
)

PRODUCT_CATEGORY_NAMES: frozenset[str] = frozenset(c.name for c in PRODUCT_CATEGORIES)


def numbered_category_list() -> str:
    return "\n".join(
        f"{index}. {category.prompt_label}"
        for index, category in enumerate(PRODUCT_CATEGORIES, start=1)
    )
