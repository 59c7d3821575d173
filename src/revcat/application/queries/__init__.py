"""Query layer. Read-only operations for retrieving data."""

from revcat.application.queries.audit import ListAuditEntriesQuery
from revcat.application.queries.classification import GetCategoryStatsQuery

__all__ = [
    "GetCategoryStatsQuery",
    "ListAuditEntriesQuery",
]
