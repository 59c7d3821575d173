"""
Pytest fixtures for application tests.

Command pipelines run against real SQLAlchemy repositories on an
in-memory SQLite database, with the external classifier replaced by a
fake or by the HTTP adapter on a mocked transport.
"""

import pytest_asyncio

from revcat.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import db_session, sqlite_engine

__all__ = ["db_session", "repository_factory", "seed", "sqlite_engine"]


@pytest_asyncio.fixture
async def repository_factory(db_session):
    return SQLAlchemyRepositoryFactory(db_session)


@pytest_asyncio.fixture
async def seed(repository_factory):
    """Persist classifications: await seed(c1, c2, ...)."""

    async def _seed(*classifications):
        repo = repository_factory.classification_repository()
        for classification in classifications:
            await repo.save(classification)
        return list(classifications)

    return _seed
