"""Fetch per-category statistics via the stats read port."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from revcat.application.dtos import CategoryStatsResult
from revcat.application.ports import CategoryStatsReadPort

if TYPE_CHECKING:
    from revcat.application.factories import RepositoryFactory


class GetCategoryStatsQuery:
    """Return counts, confidence bands and approval rate per category."""

    def __init__(self, stats_read_port: CategoryStatsReadPort):
        self._stats = stats_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCategoryStatsQuery:
        return cls(stats_read_port=factory.category_stats_read_port())

    async def execute(self, customer_id: UUID) -> CategoryStatsResult:
        return await self._stats.category_stats(customer_id=customer_id)
