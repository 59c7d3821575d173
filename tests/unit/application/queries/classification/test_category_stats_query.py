"""Tests for GetCategoryStatsQuery."""

from unittest.mock import AsyncMock, MagicMock

from revcat.application.dtos import CategoryStats, CategoryStatsResult
from revcat.application.queries import GetCategoryStatsQuery
from tests.shared.fixtures.database import TEST_CUSTOMER_ID
from tests.shared.fixtures.factories import make_classification


def _stats(category: str, prpc_count: int) -> CategoryStats:
    return CategoryStats(
        category=category,
        prpc_count=prpc_count,
        subscription_count=0,
        avg_confidence=None,
        approval_rate=0.0,
        needs_review_count=0,
        low_confidence_count=0,
        medium_confidence_count=0,
        high_confidence_count=0,
    )


class TestGetCategoryStatsQuery:
    async def test_delegates_to_read_port(self):
        port = AsyncMock()
        port.category_stats.return_value = CategoryStatsResult(
            customer_id=TEST_CUSTOMER_ID,
            categories=[_stats("SaaS", 3), _stats("Tech", 2)],
        )

        result = await GetCategoryStatsQuery(port).execute(TEST_CUSTOMER_ID)

        port.category_stats.assert_awaited_once_with(customer_id=TEST_CUSTOMER_ID)
        assert result.total_prpcs == 5

    async def test_from_factory_with_sqlite(self, repository_factory, seed):
        await seed(make_classification(category="SaaS", confidence=0.9))

        result = await GetCategoryStatsQuery.from_factory(repository_factory).execute(
            TEST_CUSTOMER_ID,
        )

        assert [c.category for c in result.categories] == ["SaaS"]
        assert result.categories[0].high_confidence_count == 1

    def test_from_factory(self):
        factory = MagicMock()

        GetCategoryStatsQuery.from_factory(factory)

        factory.category_stats_read_port.assert_called_once()
