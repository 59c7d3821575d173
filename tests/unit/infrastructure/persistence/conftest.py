"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh in-memory SQLite database. The same repositories
run against PostgreSQL in tests/integration/persistence.
"""

from uuid import uuid4

import pytest_asyncio

from revcat.infrastructure.persistence.sqlalchemy.models import (
    CoverageCandidateModel,
)
from tests.shared.fixtures.database import (
    TEST_CUSTOMER_ID,
    db_session,
    sqlite_engine,
)

__all__ = ["db_session", "sqlite_engine", "seed_coverage"]


@pytest_asyncio.fixture
async def seed_coverage(db_session):
    """Insert coverage candidates: seed_coverage(subscription_id, [categories])."""

    async def _seed(subscription_id, categories, customer_id=TEST_CUSTOMER_ID):
        db_session.add(
            CoverageCandidateModel(
                id=uuid4(),
                customer_id=customer_id,
                subscription_id=subscription_id,
                covers_product_categories=list(categories),
            ),
        )
        await db_session.flush()

    return _seed
