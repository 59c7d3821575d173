"""Category catalog entry entity."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from revcat.domain.shared.time import utc_now


class CategoryCatalogEntry:
    """
    A product category and its pattern of business.

    Entries with customer_id None are global and visible to every customer;
    customer-scoped entries shadow nothing and are only visible to their
    customer. (customer_id, category_name) is unique.
    """

    def __init__(  # noqa: PLR0913
        self,
        category_name: str,
        pattern_of_business_name: str,
        customer_id: Optional[UUID] = None,
        description: Optional[str] = None,
        active: bool = True,
        version: int = 1,
        # For reconstitution from persistence:
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._category_name = category_name.strip()
        self._pattern_of_business_name = pattern_of_business_name
        self._customer_id = customer_id
        self._description = description
        self._active = active
        self._version = version
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        self._validate()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def category_name(self) -> str:
        return self._category_name

    @property
    def pattern_of_business_name(self) -> str:
        return self._pattern_of_business_name

    @property
    def customer_id(self) -> Optional[UUID]:
        return self._customer_id

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def active(self) -> bool:
        return self._active

    @property
    def version(self) -> int:
        return self._version

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_global(self) -> bool:
        return self._customer_id is None

    def _validate(self) -> None:
        if not self._category_name:
            msg = "Category name cannot be empty"
            raise ValueError(msg)

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            msg = "Category name cannot be empty"
            raise ValueError(msg)

        self._category_name = new_name.strip()
        self._version += 1
        self._updated_at = utc_now()

    @classmethod
    def for_customer(cls, customer_id: UUID, category_name: str) -> CategoryCatalogEntry:
        """Catalog row bootstrapped for a category first seen in a correction.

        The pattern of business defaults to the category name until someone
        configures it.
        """
        return cls(
            category_name=category_name,
            pattern_of_business_name=category_name.strip(),
            customer_id=customer_id,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategoryCatalogEntry):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        scope = "global" if self.is_global else str(self._customer_id)
        return f"CategoryCatalogEntry[{scope}]: {self._category_name}"
