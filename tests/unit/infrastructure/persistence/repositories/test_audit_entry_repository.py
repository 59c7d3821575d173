"""Unit tests for AuditEntryRepositorySQLAlchemy."""

from datetime import timedelta
from uuid import uuid4

import pytest

from revcat.domain.audit import (
    AuditAction,
    AuditEntry,
    CategoryOperationTarget,
    ClassificationTarget,
    SubscriptionTarget,
)
from revcat.domain.shared.time import utc_now
from revcat.infrastructure.persistence.sqlalchemy.repositories import (
    AuditEntryRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import TEST_CUSTOMER_ID, TEST_CUSTOMER_ID_2


@pytest.fixture
def repo(db_session):
    return AuditEntryRepositorySQLAlchemy(db_session)


def _entry(target, minutes_ago=0, action=AuditAction.APPROVE, **kwargs) -> AuditEntry:
    return AuditEntry(
        actor="analyst",
        action=action,
        target=target,
        created_at=utc_now() - timedelta(minutes=minutes_ago),
        **kwargs,
    )


class TestAuditEntryRepository:
    async def test_round_trip_keeps_target_variant(self, repo):
        classification_id = uuid4()
        entries = [
            _entry(ClassificationTarget(classification_id, TEST_CUSTOMER_ID), 3),
            _entry(SubscriptionTarget(uuid4(), TEST_CUSTOMER_ID), 2),
            _entry(
                CategoryOperationTarget(TEST_CUSTOMER_ID),
                1,
                action=AuditAction.MERGE_CATEGORY,
                before_json={"from_category": "Hybrid"},
                after_json={"to_category": "Tech", "prpc_count": 3},
            ),
        ]

        await repo.add_many(entries)
        stored = await repo.find_by_customer(TEST_CUSTOMER_ID)

        assert [type(e.target) for e in stored] == [
            CategoryOperationTarget,
            SubscriptionTarget,
            ClassificationTarget,
        ]
        assert stored[0].after_json == {"to_category": "Tech", "prpc_count": 3}
        assert stored[2].target.classification_id == classification_id

    async def test_newest_first_with_limit(self, repo):
        target = CategoryOperationTarget(TEST_CUSTOMER_ID)
        for minutes_ago in (10, 30, 20, 40):
            await repo.add(_entry(target, minutes_ago))

        stored = await repo.find_by_customer(TEST_CUSTOMER_ID, limit=2)

        assert len(stored) == 2
        assert stored[0].created_at > stored[1].created_at

    async def test_scoped_to_customer(self, repo):
        await repo.add(_entry(CategoryOperationTarget(TEST_CUSTOMER_ID_2)))

        assert await repo.find_by_customer(TEST_CUSTOMER_ID) == []

    async def test_find_by_target(self, repo):
        target = ClassificationTarget(uuid4(), TEST_CUSTOMER_ID)
        await repo.add(_entry(target, 5, action=AuditAction.AI_RECLASSIFY))
        await repo.add(_entry(target, 1, action=AuditAction.APPROVE))
        await repo.add(_entry(ClassificationTarget(uuid4(), TEST_CUSTOMER_ID)))

        stored = await repo.find_by_target(target)

        assert [e.action for e in stored] == [AuditAction.AI_RECLASSIFY, AuditAction.APPROVE]

    async def test_add_many_with_nothing(self, repo):
        await repo.add_many([])

        assert await repo.find_by_customer(TEST_CUSTOMER_ID) == []
