"""List the most recent audit entries of a customer."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from revcat.domain.audit import AuditEntry, AuditEntryRepository
from revcat.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from revcat.application.factories import RepositoryFactory

MAX_LIMIT = 1000


class ListAuditEntriesQuery:
    """Newest audit entries first."""

    def __init__(self, audit_repository: AuditEntryRepository):
        self._audit_repo = audit_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAuditEntriesQuery:
        return cls(audit_repository=factory.audit_entry_repository())

    async def execute(self, customer_id: UUID, limit: int = 100) -> list[AuditEntry]:
        if not 1 <= limit <= MAX_LIMIT:
            msg = f"limit must be between 1 and {MAX_LIMIT}"
            raise ValidationError(msg)
        return await self._audit_repo.find_by_customer(customer_id, limit=limit)
