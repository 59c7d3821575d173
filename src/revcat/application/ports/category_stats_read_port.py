"""Category statistics read port.

Report-like: returns application DTOs, not domain entities.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from revcat.application.dtos import CategoryStatsResult


class CategoryStatsReadPort(Protocol):
    """Pre-aggregated per-category statistics for one customer."""

    async def category_stats(self, *, customer_id: UUID) -> CategoryStatsResult:
        """Counts, confidence bands and approval rate per category."""
        ...
