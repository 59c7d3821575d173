"""Audit trail router."""

from uuid import UUID

from fastapi import APIRouter, Query

from revcat.application.queries.audit import ListAuditEntriesQuery
from revcat.presentation.api.dependencies import RepoFactory
from revcat.presentation.api.schemas.audit import (
    AuditEntryListResponse,
    AuditEntryResponse,
)

router = APIRouter()


@router.get("", summary="List recent audit entries")
async def list_audit_entries(
    factory: RepoFactory,
    customer_id: UUID = Query(..., description="Customer whose trail to list"),
    limit: int = Query(100, description="Maximum number of entries (1-1000)"),
) -> AuditEntryListResponse:
    """Newest first."""
    entries = await ListAuditEntriesQuery.from_factory(factory).execute(
        customer_id,
        limit=limit,
    )
    return AuditEntryListResponse(
        entries=[AuditEntryResponse.from_entity(e) for e in entries],
        count=len(entries),
    )
