"""Audit domain repository interfaces."""

from revcat.domain.audit.repositories.audit_entry_repository import (
    AuditEntryRepository,
)

__all__ = ["AuditEntryRepository"]
