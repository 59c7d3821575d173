"""
Unit tests for SqlAlchemyCategoryStatsReadAdapter.

Statistics are computed over classifications and coverage candidates of
one customer.
"""

from uuid import uuid4

import pytest

from revcat.domain.classification.value_objects import ClassificationStatus
from revcat.infrastructure.persistence.sqlalchemy.adapters.classification import (
    SqlAlchemyCategoryStatsReadAdapter,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories import (
    LineItemClassificationRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import TEST_CUSTOMER_ID, TEST_CUSTOMER_ID_2
from tests.shared.fixtures.factories import make_classification


@pytest.fixture
def adapter(db_session):
    return SqlAlchemyCategoryStatsReadAdapter(db_session)


@pytest.fixture
def classification_repo(db_session):
    return LineItemClassificationRepositorySQLAlchemy(db_session)


class TestCategoryStats:
    async def test_counts_bands_and_approval_rate(self, adapter, classification_repo):
        for confidence, status, needs_review in [
            (0.2, ClassificationStatus.INFERRED, True),
            (0.5, ClassificationStatus.APPROVED, False),
            (0.9, ClassificationStatus.APPROVED, False),
            (None, ClassificationStatus.USER_ADJUSTED, True),
        ]:
            await classification_repo.save(
                make_classification(
                    category="SaaS",
                    confidence=confidence,
                    status=status,
                    needs_review=needs_review,
                ),
            )

        result = await adapter.category_stats(customer_id=TEST_CUSTOMER_ID)

        assert len(result.categories) == 1
        saas = result.categories[0]
        assert saas.category == "SaaS"
        assert saas.prpc_count == 4
        assert saas.approval_rate == 0.5
        assert saas.needs_review_count == 2
        assert saas.avg_confidence == pytest.approx(0.5333, abs=1e-4)
        assert (
            saas.low_confidence_count,
            saas.medium_confidence_count,
            saas.high_confidence_count,
        ) == (1, 1, 1)

    async def test_band_boundaries(self, adapter, classification_repo):
        for confidence in (0.4, 0.7):
            await classification_repo.save(
                make_classification(category="Tech", confidence=confidence),
            )

        tech = (await adapter.category_stats(customer_id=TEST_CUSTOMER_ID)).categories[0]

        assert tech.low_confidence_count == 0
        assert tech.medium_confidence_count == 1
        assert tech.high_confidence_count == 1

    async def test_subscription_count_from_coverage(
        self,
        adapter,
        classification_repo,
        seed_coverage,
    ):
        await classification_repo.save(make_classification(category="SaaS"))
        first, second = uuid4(), uuid4()
        await seed_coverage(first, ["SaaS", "Support"])
        await seed_coverage(first, ["SaaS"])
        await seed_coverage(second, ["SaaS"])
        await seed_coverage(uuid4(), ["SaaS"], customer_id=TEST_CUSTOMER_ID_2)

        result = await adapter.category_stats(customer_id=TEST_CUSTOMER_ID)

        by_name = {c.category: c for c in result.categories}
        assert by_name["SaaS"].subscription_count == 2
        # A covered category without classifications still shows up
        assert by_name["Support"].prpc_count == 0
        assert by_name["Support"].subscription_count == 1
        assert by_name["Support"].avg_confidence is None

    async def test_sorted_and_scoped(self, adapter, classification_repo):
        for category in ("Tech", "Hardware", "SaaS"):
            await classification_repo.save(make_classification(category=category))
        await classification_repo.save(
            make_classification(category="Other", customer_id=TEST_CUSTOMER_ID_2),
        )
        await classification_repo.save(make_classification(category=None))

        result = await adapter.category_stats(customer_id=TEST_CUSTOMER_ID)

        assert [c.category for c in result.categories] == ["Hardware", "SaaS", "Tech"]
        assert result.total_prpcs == 3

    async def test_no_data(self, adapter):
        result = await adapter.category_stats(customer_id=TEST_CUSTOMER_ID)

        assert result.categories == []
        assert result.total_prpcs == 0
