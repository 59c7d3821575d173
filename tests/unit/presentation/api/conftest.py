"""Pytest fixtures for API tests.

Each test gets its own in-memory SQLite database and a fake classifier.
Seeding and inspection run synchronously in a fresh event loop so they
do not clash with the TestClient's loop.
"""

import asyncio
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

import revcat.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from revcat.domain.classification.entities import (
    CategoryCatalogEntry,
    LineItemClassification,
)
from revcat.domain.subscription import Subscription
from revcat.infrastructure.persistence.sqlalchemy.init_db import (
    create_database_engine,
)
from revcat.infrastructure.persistence.sqlalchemy.models.base import Base
from revcat.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from revcat.presentation.api.app import API_V1_PREFIX, create_app
from revcat.presentation.api.dependencies import get_classifier, get_db_session
from revcat_config.settings import Settings
from tests.shared.fixtures.classifier import FakeCategoryClassifier


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        debug=True,
        database_url="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def api_engine():
    engine = create_database_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async def _setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    _run(_setup())
    yield engine
    _run(engine.dispose())


@pytest.fixture
def session_maker(api_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(api_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def fake_classifier() -> FakeCategoryClassifier:
    """Classifier without preset answers. Tests set the decision they need."""
    return FakeCategoryClassifier()


@pytest.fixture
def test_client(api_settings, session_maker, fake_classifier):
    """Create a test client bound to the in-memory database.

    The lifespan is not entered, so the production engine is never built.
    """
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_classifier] = lambda: fake_classifier

    return TestClient(app)


@pytest.fixture
def seed(session_maker) -> Callable[..., list[Any]]:
    """Persist entities and commit.

    Usage:
        first, second = seed(make_classification(), make_subscription())
    """

    async def _seed(entities):
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            for entity in entities:
                if isinstance(entity, LineItemClassification):
                    await factory.classification_repository().save(entity)
                elif isinstance(entity, Subscription):
                    await factory.subscription_repository().save(entity)
                elif isinstance(entity, CategoryCatalogEntry):
                    await factory.category_catalog_repository().add(entity)
                else:
                    msg = f"Cannot seed {type(entity).__name__}"
                    raise TypeError(msg)
            await session.commit()

    def seed_entities(*entities):
        _run(_seed(entities))
        return list(entities)

    return seed_entities


@pytest.fixture
def load_classification(session_maker) -> Callable:
    """Read a classification back from the database."""

    async def _load(classification_id):
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            return await factory.classification_repository().find_by_id(
                classification_id,
            )

    return lambda classification_id: _run(_load(classification_id))
