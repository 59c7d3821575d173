"""Audit domain entities."""

from revcat.domain.audit.entities.audit_entry import AuditEntry

__all__ = ["AuditEntry"]
