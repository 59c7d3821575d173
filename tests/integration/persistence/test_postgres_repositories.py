"""
Repository tests against PostgreSQL.

The unit suite runs on SQLite; these cover what depends on the real
backend: savepoints after a unique violation, JSON columns, timezone
handling and the aggregate SQL of the stats adapter.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select

from revcat.application.commands.classification import MergeCategoryCommand
from revcat.domain.audit import AuditAction, AuditEntry, CategoryOperationTarget
from revcat.domain.classification.exceptions import (
    CategoryOperationPartiallyAppliedError,
)
from revcat.domain.classification.value_objects import ClassificationStatus
from revcat.domain.shared.exceptions import DataAccessError
from revcat.infrastructure.persistence.sqlalchemy.models import (
    LineItemClassificationModel,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import TEST_CUSTOMER_ID
from tests.shared.fixtures.factories import make_catalog_entry, make_classification

pytestmark = pytest.mark.integration


@pytest.fixture
def factory(pg_session):
    return SQLAlchemyRepositoryFactory(pg_session)


async def test_classification_round_trip(factory):
    repo = factory.classification_repository()
    classification = make_classification(product_name="Server Pro", confidence=0.35)

    await repo.save(classification)
    stored = await repo.find_by_id(classification.id)

    assert stored.product_name == "Server Pro"
    assert stored.confidence == 0.35
    assert stored.created_at.tzinfo is not None


async def test_bulk_update_category(factory):
    repo = factory.classification_repository()
    first = make_classification(category="SaaS")
    second = make_classification(category="SaaS")
    await repo.save(first)
    await repo.save(second)

    count = await repo.bulk_update_category([first.id], "Hardware", rationale="Boxes")

    assert count == 1
    stored = await repo.find_by_id(first.id)
    assert stored.inferred_category == "Hardware"
    assert stored.status == ClassificationStatus.USER_ADJUSTED
    assert (await repo.find_by_id(second.id)).inferred_category == "SaaS"


async def test_duplicate_catalog_entry_keeps_session_usable(factory):
    catalog = factory.category_catalog_repository()
    await catalog.add(make_catalog_entry("Hardware"))

    assert await catalog.add(make_catalog_entry("Hardware")) is False
    assert await catalog.find_for_customer(TEST_CUSTOMER_ID, "Hardware") is not None


async def test_audit_json_round_trip(factory):
    audit = factory.audit_entry_repository()
    await audit.add(
        AuditEntry(
            actor="system",
            action=AuditAction.MERGE_CATEGORY,
            target=CategoryOperationTarget(TEST_CUSTOMER_ID),
            before_json={"from_category": "Hybrid", "ids": ["a", "b"]},
            after_json={"to_category": "Tech", "prpc_count": 2},
        ),
    )

    (stored,) = await audit.find_by_customer(TEST_CUSTOMER_ID)

    assert stored.before_json == {"from_category": "Hybrid", "ids": ["a", "b"]}
    assert stored.after_json["prpc_count"] == 2


async def test_category_stats(factory):
    repo = factory.classification_repository()
    for confidence in (0.2, 0.5, 0.9):
        await repo.save(make_classification(category="SaaS", confidence=confidence))

    result = await factory.category_stats_read_port().category_stats(
        customer_id=TEST_CUSTOMER_ID,
    )

    (saas,) = result.categories
    assert saas.prpc_count == 3
    assert saas.avg_confidence == pytest.approx(0.5333, abs=1e-4)
    assert (
        saas.low_confidence_count,
        saas.medium_confidence_count,
        saas.high_confidence_count,
    ) == (1, 1, 1)


async def test_partial_merge_survives_commit(factory, pg_session):
    repo = factory.classification_repository()
    hybrid = make_classification(category="Hybrid")
    await repo.save(hybrid)
    await repo.save(make_classification(category="Tech"))
    await pg_session.commit()

    command = MergeCategoryCommand.from_factory(factory)
    with (
        patch.object(
            factory.audit_entry_repository(),
            "add",
            AsyncMock(side_effect=DataAccessError("write audit entries")),
        ),
        pytest.raises(CategoryOperationPartiallyAppliedError),
    ):
        await command.execute(TEST_CUSTOMER_ID, "Hybrid", "Tech")
    await pg_session.commit()

    pg_session.expire_all()
    category = await pg_session.scalar(
        select(LineItemClassificationModel.inferred_category).where(
            LineItemClassificationModel.id == hybrid.id,
        ),
    )
    assert category == "Tech"
