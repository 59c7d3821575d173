"""SQLAlchemy implementation of CategoryCatalogRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from revcat.domain.classification.entities import CategoryCatalogEntry
from revcat.domain.classification.repositories import CategoryCatalogRepository
from revcat.domain.shared.exceptions import DataAccessError
from revcat.domain.shared.time import ensure_tz_aware
from revcat.infrastructure.persistence.sqlalchemy.models import CategoryCatalogModel
from revcat.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_data_errors,
)

logger = logging.getLogger(__name__)


class CategoryCatalogRepositorySQLAlchemy(CategoryCatalogRepository):
    """SQLAlchemy implementation of the category catalog repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_for_customer(
        self,
        customer_id: UUID,
        category_name: str,
    ) -> Optional[CategoryCatalogEntry]:
        stmt = select(CategoryCatalogModel).where(
            CategoryCatalogModel.customer_id == customer_id,
            CategoryCatalogModel.category_name == category_name,
        )
        async with translate_data_errors("load catalog entry"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_visible(
        self,
        customer_id: UUID,
        category_name: str,
    ) -> Optional[CategoryCatalogEntry]:
        stmt = select(CategoryCatalogModel).where(
            self._visible_to(customer_id),
            CategoryCatalogModel.category_name == category_name,
        )
        async with translate_data_errors("load catalog entry"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        if not models:
            return None
        # Customer-scoped entries win over global ones
        models = sorted(models, key=lambda m: m.customer_id is None)
        return self._map_to_domain(models[0])

    async def add(self, entry: CategoryCatalogEntry) -> bool:
        model = CategoryCatalogModel(
            id=entry.id,
            customer_id=entry.customer_id,
            category_name=entry.category_name,
            pob_name=entry.pattern_of_business_name,
            description=entry.description,
            active=entry.active,
            version=entry.version,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
        try:
            async with translate_data_errors("insert catalog entry"):
                async with self._session.begin_nested():
                    self._session.add(model)
        except DataAccessError as exc:
            if not isinstance(exc.__cause__, IntegrityError):
                raise
            # Savepoint rolled back; only a duplicate key counts as success
            if entry.customer_id is not None and await self.find_for_customer(
                entry.customer_id,
                entry.category_name,
            ):
                logger.debug(
                    "Catalog entry '%s' already exists for customer %s",
                    entry.category_name,
                    entry.customer_id,
                )
                return False
            raise

        logger.debug("Catalog entry added: %s", entry)
        return True

    async def save(self, entry: CategoryCatalogEntry) -> None:
        async with (
            translate_data_errors("save catalog entry"),
            self._session.begin_nested(),
        ):
            model = await self._session.get(CategoryCatalogModel, entry.id)
            if model is None:
                msg = f"Catalog entry {entry.id} does not exist"
                raise DataAccessError("save catalog entry", details={"reason": msg})
            model.category_name = entry.category_name
            model.pob_name = entry.pattern_of_business_name
            model.description = entry.description
            model.active = entry.active
            model.version = entry.version
            model.updated_at = entry.updated_at

    @staticmethod
    def _visible_to(customer_id: UUID):
        return or_(
            CategoryCatalogModel.customer_id == customer_id,
            CategoryCatalogModel.customer_id.is_(None),
        )

    @staticmethod
    def _map_to_domain(model: CategoryCatalogModel) -> CategoryCatalogEntry:
        return CategoryCatalogEntry(
            id=model.id,
            customer_id=model.customer_id,
            category_name=model.category_name,
            pattern_of_business_name=model.pob_name,
            description=model.description,
            active=bool(model.active),
            version=model.version,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
