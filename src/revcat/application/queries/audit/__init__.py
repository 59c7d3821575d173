"""Audit trail queries."""

from revcat.application.queries.audit.list_audit_entries_query import (
    ListAuditEntriesQuery,
)

__all__ = ["ListAuditEntriesQuery"]
