"""Repository interface for the category catalog."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from revcat.domain.classification.entities import CategoryCatalogEntry


class CategoryCatalogRepository(ABC):
    """Persistence of category catalog entries."""

    @abstractmethod
    async def find_for_customer(
        self,
        customer_id: UUID,
        category_name: str,
    ) -> Optional[CategoryCatalogEntry]:
        """
        Find the customer-scoped entry for a category name.

        Global entries are not returned.
        """

    @abstractmethod
    async def find_visible(
        self,
        customer_id: UUID,
        category_name: str,
    ) -> Optional[CategoryCatalogEntry]:
        """
        Find an entry visible to the customer (customer-scoped or global).

        Customer-scoped entries win over global ones.
        """

    @abstractmethod
    async def add(self, entry: CategoryCatalogEntry) -> bool:
        """
        Insert a new entry.

        Returns
        -------
        True if inserted, False if an entry with the same
        (customer_id, category_name) already exists. Any other failure
        raises DataAccessError.
        """

    @abstractmethod
    async def save(self, entry: CategoryCatalogEntry) -> None:
        """Persist changes to an existing entry (e.g. after a rename)."""
