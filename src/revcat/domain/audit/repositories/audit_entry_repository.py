"""Repository interface for the append-only audit trail."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from revcat.domain.audit.entities import AuditEntry
from revcat.domain.audit.value_objects import AuditTarget


class AuditEntryRepository(ABC):
    """Append-only persistence of audit entries.

    There is deliberately no update or delete.
    """

    @abstractmethod
    async def add(self, entry: AuditEntry) -> None:
        """Append one entry."""

    @abstractmethod
    async def add_many(self, entries: Sequence[AuditEntry]) -> None:
        """Append several entries in one round trip."""

    @abstractmethod
    async def find_by_customer(
        self,
        customer_id: UUID,
        limit: int = 100,
    ) -> list[AuditEntry]:
        """
        List a customer's entries, newest first.

        Parameters
        ----------
        customer_id
            Customer the entries belong to
        limit
            Maximum number of entries returned
        """

    @abstractmethod
    async def find_by_target(self, target: AuditTarget) -> list[AuditEntry]:
        """List every entry about one target, oldest first."""
