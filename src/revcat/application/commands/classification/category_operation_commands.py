"""Rename and merge categories across a customer's classifications.

Categories are referenced by name, so both operations rewrite every
classification in the source category. Steps run in order:

a. fetch the classifications in the source category
b. reassign them in one batched update
c. rename the catalog entry (rename only)
d. write one audit entry summarising the operation

There is no transaction across the steps. A failure in (a) or (b) is a
total failure. A failure in (c) or (d) leaves (b) in place and is reported
as CategoryOperationPartiallyAppliedError naming the failed step.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from revcat.application.dtos import CategoryOperationResult
from revcat.domain.audit import (
    SYSTEM_ACTOR,
    AuditAction,
    AuditEntry,
    CategoryOperationTarget,
)
from revcat.domain.classification.entities import CategoryCatalogEntry
from revcat.domain.classification.exceptions import (
    CategoryNotFoundError,
    CategoryOperationPartiallyAppliedError,
    DuplicateCategoryError,
)
from revcat.domain.shared.exceptions import DataAccessError, ValidationError

if TYPE_CHECKING:
    from uuid import UUID

    from revcat.application.factories import RepositoryFactory
    from revcat.domain.audit.repositories import AuditEntryRepository
    from revcat.domain.classification.repositories import (
        CategoryCatalogRepository,
        LineItemClassificationRepository,
    )

logger = logging.getLogger(__name__)

STEP_FETCH = "fetch_records"
STEP_REASSIGN = "reassign_records"
STEP_CATALOG = "update_catalog"
STEP_AUDIT = "write_audit_entry"


class _CategoryOperation:
    """Shared steps of rename and merge."""

    operation = ""

    def __init__(
        self,
        classification_repository: LineItemClassificationRepository,
        catalog_repository: CategoryCatalogRepository,
        audit_repository: AuditEntryRepository,
    ):
        self._classification_repo = classification_repository
        self._catalog_repo = catalog_repository
        self._audit_repo = audit_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory):
        return cls(
            classification_repository=factory.classification_repository(),
            catalog_repository=factory.category_catalog_repository(),
            audit_repository=factory.audit_entry_repository(),
        )

    @staticmethod
    def _validate_names(source: str, target: str) -> tuple[str, str]:
        source = (source or "").strip()
        target = (target or "").strip()
        if not source or not target:
            msg = "Both category names are required"
            raise ValidationError(msg)
        if source == target:
            msg = "Source and target category must differ"
            raise ValidationError(msg)
        return source, target

    async def _reassign(self, customer_id: UUID, source: str, target: str) -> int:
        records = await self._classification_repo.find_by_category(customer_id, source)
        if not records:
            return 0
        return await self._classification_repo.bulk_update_category(
            [r.id for r in records],
            target,
        )

    def _partial_failure(
        self,
        error: DataAccessError,
        failed_step: str,
        applied_steps: list[str],
        affected_count: int,
    ) -> CategoryOperationPartiallyAppliedError:
        logger.error(
            "Category %s partially applied: step '%s' failed after %s "
            "(%d records already reassigned): %s",
            self.operation,
            failed_step,
            ", ".join(applied_steps),
            affected_count,
            error.message,
        )
        return CategoryOperationPartiallyAppliedError(
            operation=self.operation,
            failed_step=failed_step,
            applied_steps=applied_steps,
            affected_count=affected_count,
        )


class RenameCategoryCommand(_CategoryOperation):
    """Give a category a new name everywhere it is used."""

    operation = "rename"

    async def execute(
        self,
        customer_id: UUID,
        old_name: str,
        new_name: str,
        actor_id: Optional[UUID] = None,
    ) -> CategoryOperationResult:
        old_name, new_name = self._validate_names(old_name, new_name)

        # A global entry of the same name does not block a customer rename
        if await self._catalog_repo.find_for_customer(
            customer_id,
            new_name,
        ) or await self._classification_repo.count_by_category(customer_id, new_name):
            raise DuplicateCategoryError(new_name)

        catalog_entry = await self._catalog_repo.find_for_customer(customer_id, old_name)
        if catalog_entry is None and not await self._category_in_use(
            customer_id,
            old_name,
        ):
            raise CategoryNotFoundError(old_name, customer_id)

        renamed_count = await self._reassign(customer_id, old_name, new_name)
        applied = [STEP_FETCH, STEP_REASSIGN]

        try:
            await self._rename_catalog_entry(customer_id, catalog_entry, new_name)
        except DataAccessError as e:
            raise self._partial_failure(e, STEP_CATALOG, applied, renamed_count) from e
        applied.append(STEP_CATALOG)

        try:
            await self._audit_repo.add(
                AuditEntry(
                    actor=str(actor_id) if actor_id else SYSTEM_ACTOR,
                    action=AuditAction.RENAME_CATEGORY,
                    target=CategoryOperationTarget(customer_id),
                    before_json={"category": old_name},
                    after_json={"category": new_name, "prpc_count": renamed_count},
                ),
            )
        except DataAccessError as e:
            raise self._partial_failure(e, STEP_AUDIT, applied, renamed_count) from e

        logger.info(
            "Renamed category '%s' to '%s' for customer %s (%d records)",
            old_name,
            new_name,
            customer_id,
            renamed_count,
        )
        return CategoryOperationResult(
            operation=self.operation,
            from_category=old_name,
            to_category=new_name,
            affected_count=renamed_count,
            catalog_updated=True,
        )

    async def _category_in_use(self, customer_id: UUID, name: str) -> bool:
        if await self._catalog_repo.find_visible(customer_id, name):
            return True
        return await self._classification_repo.count_by_category(customer_id, name) > 0

    async def _rename_catalog_entry(
        self,
        customer_id: UUID,
        entry: Optional[CategoryCatalogEntry],
        new_name: str,
    ) -> None:
        if entry is not None:
            entry.rename(new_name)
            await self._catalog_repo.save(entry)
            return
        # Renaming a global category gives the customer its own entry
        await self._catalog_repo.add(
            CategoryCatalogEntry.for_customer(customer_id, new_name),
        )


class MergeCategoryCommand(_CategoryOperation):
    """Move every classification of one category into another existing one."""

    operation = "merge"

    async def execute(
        self,
        customer_id: UUID,
        from_category: str,
        to_category: str,
        actor_id: Optional[UUID] = None,
    ) -> CategoryOperationResult:
        from_category, to_category = self._validate_names(from_category, to_category)

        target_exists = await self._catalog_repo.find_visible(
            customer_id,
            to_category,
        ) is not None or (
            await self._classification_repo.count_by_category(customer_id, to_category)
            > 0
        )
        if not target_exists:
            raise CategoryNotFoundError(to_category, customer_id)

        merged_count = await self._reassign(customer_id, from_category, to_category)

        try:
            await self._audit_repo.add(
                AuditEntry(
                    actor=str(actor_id) if actor_id else SYSTEM_ACTOR,
                    action=AuditAction.MERGE_CATEGORY,
                    target=CategoryOperationTarget(customer_id),
                    before_json={"from_category": from_category},
                    after_json={
                        "to_category": to_category,
                        "category": to_category,
                        "prpc_count": merged_count,
                    },
                ),
            )
        except DataAccessError as e:
            raise self._partial_failure(
                e,
                STEP_AUDIT,
                [STEP_FETCH, STEP_REASSIGN],
                merged_count,
            ) from e

        logger.info(
            "Merged category '%s' into '%s' for customer %s (%d records)",
            from_category,
            to_category,
            customer_id,
            merged_count,
        )
        return CategoryOperationResult(
            operation=self.operation,
            from_category=from_category,
            to_category=to_category,
            affected_count=merged_count,
        )
