"""SQLAlchemy implementation of AuditEntryRepository."""

from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revcat.domain.audit import AuditAction, AuditEntry, AuditEntryRepository, AuditTarget
from revcat.domain.audit.value_objects import audit_target_from_columns
from revcat.domain.shared.time import ensure_tz_aware
from revcat.infrastructure.persistence.sqlalchemy.models import AuditEntryModel
from revcat.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_data_errors,
)

logger = logging.getLogger(__name__)


class AuditEntryRepositorySQLAlchemy(AuditEntryRepository):
    """Append-only audit log. Rows are never updated or deleted."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(self, entry: AuditEntry) -> None:
        await self.add_many([entry])

    async def add_many(self, entries: Sequence[AuditEntry]) -> None:
        if not entries:
            return
        async with (
            translate_data_errors("write audit entries"),
            self._session.begin_nested(),
        ):
            self._session.add_all([self._map_to_model(e) for e in entries])
        logger.debug("Wrote %d audit entries", len(entries))

    async def find_by_customer(
        self,
        customer_id: UUID,
        limit: int = 100,
    ) -> list[AuditEntry]:
        stmt = (
            select(AuditEntryModel)
            .where(AuditEntryModel.customer_id == customer_id)
            .order_by(AuditEntryModel.created_at.desc(), AuditEntryModel.id)
            .limit(limit)
        )
        async with translate_data_errors("list audit entries"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(m) for m in models]

    async def find_by_target(self, target: AuditTarget) -> list[AuditEntry]:
        stmt = (
            select(AuditEntryModel)
            .where(
                AuditEntryModel.customer_id == target.customer_id,
                AuditEntryModel.entity_type == target.entity_type.value,
                AuditEntryModel.entity_id == target.entity_id,
            )
            .order_by(AuditEntryModel.created_at, AuditEntryModel.id)
        )
        async with translate_data_errors("list audit entries"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(m) for m in models]

    @staticmethod
    def _map_to_model(entry: AuditEntry) -> AuditEntryModel:
        return AuditEntryModel(
            id=entry.id,
            actor=entry.actor,
            action=entry.action.value,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            customer_id=entry.customer_id,
            before_json=entry.before_json,
            after_json=entry.after_json,
            created_at=entry.created_at,
        )

    @staticmethod
    def _map_to_domain(model: AuditEntryModel) -> AuditEntry:
        return AuditEntry(
            id=model.id,
            actor=model.actor,
            action=AuditAction(model.action),
            target=audit_target_from_columns(
                model.entity_type,
                model.entity_id,
                model.customer_id,
            ),
            before_json=model.before_json,
            after_json=model.after_json,
            created_at=ensure_tz_aware(model.created_at),
        )
