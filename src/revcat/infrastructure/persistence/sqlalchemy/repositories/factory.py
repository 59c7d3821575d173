"""SQLAlchemy repository factory and classifier wiring."""

from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from revcat.infrastructure.integration.ai import ChatCompletionsCategoryClassifier
from revcat.infrastructure.persistence.sqlalchemy.adapters.classification import (
    SqlAlchemyCategoryStatsReadAdapter,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.audit import (
    AuditEntryRepositorySQLAlchemy,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.classification import (
    CategoryCatalogRepositorySQLAlchemy,
    LineItemClassificationRepositorySQLAlchemy,
)
from revcat.infrastructure.persistence.sqlalchemy.repositories.subscription import (
    SubscriptionRepositorySQLAlchemy,
)
from revcat_config.settings import get_settings

logger = logging.getLogger(__name__)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so one request is one unit of work.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._classification_repo: LineItemClassificationRepositorySQLAlchemy | None = None
        self._catalog_repo: CategoryCatalogRepositorySQLAlchemy | None = None
        self._audit_repo: AuditEntryRepositorySQLAlchemy | None = None
        self._stats_read_adapter: SqlAlchemyCategoryStatsReadAdapter | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def classification_repository(self) -> LineItemClassificationRepositorySQLAlchemy:
        if self._classification_repo is None:
            self._classification_repo = LineItemClassificationRepositorySQLAlchemy(
                self._session,
            )
        return self._classification_repo

    def category_catalog_repository(self) -> CategoryCatalogRepositorySQLAlchemy:
        if self._catalog_repo is None:
            self._catalog_repo = CategoryCatalogRepositorySQLAlchemy(self._session)
        return self._catalog_repo

    def subscription_repository(self) -> SubscriptionRepositorySQLAlchemy:
        return SubscriptionRepositorySQLAlchemy(self._session)

    def audit_entry_repository(self) -> AuditEntryRepositorySQLAlchemy:
        if self._audit_repo is None:
            self._audit_repo = AuditEntryRepositorySQLAlchemy(self._session)
        return self._audit_repo

    def category_stats_read_port(self) -> SqlAlchemyCategoryStatsReadAdapter:
        if self._stats_read_adapter is None:
            self._stats_read_adapter = SqlAlchemyCategoryStatsReadAdapter(self._session)
        return self._stats_read_adapter


@lru_cache(maxsize=1)
def create_classifier_from_settings() -> ChatCompletionsCategoryClassifier:
    """Create the classifier from application settings (cached)."""
    settings = get_settings()
    api_key = (
        settings.classifier_api_key.get_secret_value()
        if settings.classifier_api_key
        else None
    )
    if not api_key:
        logger.warning("No classifier API key configured; AI operations will fail")

    logger.info(
        "Creating chat completions classifier (model: %s, url: %s)",
        settings.classifier_model,
        settings.classifier_base_url,
    )
    return ChatCompletionsCategoryClassifier(
        api_key=api_key,
        base_url=settings.classifier_base_url,
        model=settings.classifier_model,
        timeout=settings.classifier_timeout,
    )
