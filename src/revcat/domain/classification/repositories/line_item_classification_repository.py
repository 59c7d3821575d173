"""Repository interface for line-item classifications."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from revcat.domain.classification.entities import LineItemClassification
from revcat.domain.classification.services import MAX_CANDIDATES


class LineItemClassificationRepository(ABC):
    """Persistence of PRPC classifications.

    Every method raises DataAccessError when the record store fails.
    """

    @abstractmethod
    async def find_by_id(
        self,
        classification_id: UUID,
    ) -> Optional[LineItemClassification]:
        """
        Find a classification by ID.

        Parameters
        ----------
        classification_id
            Classification ID to search for

        Returns
        -------
        Classification if found, None otherwise
        """

    @abstractmethod
    async def find_candidates(
        self,
        customer_id: UUID,
        category: Optional[str] = None,
        low_confidence_only: bool = False,
        limit: int = MAX_CANDIDATES,
    ) -> list[LineItemClassification]:
        """
        Fetch the candidate set for a feedback request.

        Parameters
        ----------
        customer_id
            Customer owning the classifications
        category
            Exact match on the inferred category, if given
        low_confidence_only
            Restrict to confidence below LOW_CONFIDENCE_THRESHOLD
        limit
            Upper bound on the number of rows returned

        Returns
        -------
        Classifications ordered by product, rate plan, charge and id
        """

    @abstractmethod
    async def find_by_category(
        self,
        customer_id: UUID,
        category: str,
    ) -> list[LineItemClassification]:
        """
        Find every classification of a customer currently in a category.

        Parameters
        ----------
        customer_id
            Customer owning the classifications
        category
            Category name (exact match)

        Returns
        -------
        Classifications in stable order (may be empty)
        """

    @abstractmethod
    async def count_by_category(self, customer_id: UUID, category: str) -> int:
        """Count a customer's classifications in a category."""

    @abstractmethod
    async def save(self, classification: LineItemClassification) -> None:
        """
        Insert or update a single classification.

        Parameters
        ----------
        classification
            Classification to persist
        """

    @abstractmethod
    async def bulk_update_category(
        self,
        classification_ids: Sequence[UUID],
        category: str,
        rationale: Optional[str] = None,
    ) -> int:
        """
        Reassign many classifications in one batched statement.

        Sets the category (and the rationale when given) and marks every
        row as user adjusted. Reviewer fields are left untouched.

        Parameters
        ----------
        classification_ids
            IDs to update
        category
            New category name
        rationale
            New rationale, or None to keep the existing one

        Returns
        -------
        Number of rows updated
        """
