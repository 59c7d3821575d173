"""Audit repositories."""

from revcat.infrastructure.persistence.sqlalchemy.repositories.audit.audit_entry_repository import (  # NOQA: E501
    AuditEntryRepositorySQLAlchemy,
)

__all__ = ["AuditEntryRepositorySQLAlchemy"]
