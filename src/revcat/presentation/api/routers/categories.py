"""Categories router: feedback-driven recategorization, rename, merge, stats."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query

from revcat.application.commands.classification import (
    MergeCategoryCommand,
    RenameCategoryCommand,
    SubmitCategoryFeedbackCommand,
)
from revcat.application.queries.classification import GetCategoryStatsQuery
from revcat.domain.classification.exceptions import (
    CategoryOperationPartiallyAppliedError,
)
from revcat.domain.classification.value_objects import FeedbackRequest
from revcat.presentation.api.dependencies import Classifier, RepoFactory
from revcat.presentation.api.schemas.categories import (
    CategoryFeedbackRequest,
    CategoryFeedbackResponse,
    CategoryStatsListResponse,
    CategoryStatsResponse,
    MergeCategoryRequest,
    MergeCategoryResponse,
    RenameCategoryRequest,
    RenameCategoryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/feedback",
    summary="Recategorize PRPCs from free-text feedback",
    responses={
        200: {"description": "Feedback applied (updated_count may be 0)"},
        400: {"description": "Empty feedback"},
        502: {"description": "Classifier answered without a valid tool call"},
        503: {"description": "Classifier or database unavailable"},
    },
)
async def submit_category_feedback(
    request: CategoryFeedbackRequest,
    factory: RepoFactory,
    classifier: Classifier,
) -> CategoryFeedbackResponse:
    """
    Turn analyst feedback into a bulk category change.

    The classifier decides the new category and a name pattern. Every
    candidate whose product, rate plan or charge contains the pattern is
    moved to the new category. With both `scope_category` and
    `low_confidence_only` set, the whole reviewed slice is moved.
    """
    feedback_request = FeedbackRequest(
        free_text=request.feedback,
        customer_id=request.customer_id,
        scope_category=request.scope_category,
        low_confidence_only=request.low_confidence_only,
    )
    command = SubmitCategoryFeedbackCommand.from_factory(factory, classifier=classifier)

    try:
        result = await command.execute(feedback_request, actor_id=request.actor_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryFeedbackResponse(
        updated_count=result.updated_count,
        new_category=result.new_category,
        rationale=result.rationale,
        pattern=result.pattern,
    )


@router.post(
    "/rename",
    summary="Rename a category",
    responses={
        200: {"description": "Category renamed"},
        404: {"description": "Category does not exist"},
        409: {"description": "New name already exists, merge instead"},
        500: {"description": "Records reassigned but a later step failed"},
    },
)
async def rename_category(
    request: RenameCategoryRequest,
    factory: RepoFactory,
) -> RenameCategoryResponse:
    """Rename a category on every classification and in the catalog."""
    command = RenameCategoryCommand.from_factory(factory)

    try:
        result = await command.execute(
            customer_id=request.customer_id,
            old_name=request.old_name,
            new_name=request.new_name,
            actor_id=request.actor_id,
        )
        await factory.session.commit()
    except CategoryOperationPartiallyAppliedError:
        # Reassigned records stay reassigned
        await factory.session.commit()
        raise
    except Exception:
        await factory.session.rollback()
        raise

    return RenameCategoryResponse(renamed_count=result.affected_count)


@router.post(
    "/merge",
    summary="Merge one category into another",
    responses={
        200: {"description": "Categories merged"},
        404: {"description": "Target category does not exist"},
        500: {"description": "Records reassigned but the audit entry failed"},
    },
)
async def merge_category(
    request: MergeCategoryRequest,
    factory: RepoFactory,
) -> MergeCategoryResponse:
    """Move every classification of `from_category` into `to_category`."""
    command = MergeCategoryCommand.from_factory(factory)

    try:
        result = await command.execute(
            customer_id=request.customer_id,
            from_category=request.from_category,
            to_category=request.to_category,
            actor_id=request.actor_id,
        )
        await factory.session.commit()
    except CategoryOperationPartiallyAppliedError:
        await factory.session.commit()
        raise
    except Exception:
        await factory.session.rollback()
        raise

    return MergeCategoryResponse(merged_count=result.affected_count)


@router.get(
    "/stats",
    summary="Per-category statistics",
)
async def get_category_stats(
    factory: RepoFactory,
    customer_id: UUID = Query(..., description="Customer to aggregate"),
) -> CategoryStatsListResponse:
    """Counts, confidence bands and approval rate per category."""
    result = await GetCategoryStatsQuery.from_factory(factory).execute(customer_id)
    return CategoryStatsListResponse(
        customer_id=result.customer_id,
        categories=[
            CategoryStatsResponse(
                category=s.category,
                prpc_count=s.prpc_count,
                subscription_count=s.subscription_count,
                avg_confidence=s.avg_confidence,
                approval_rate=s.approval_rate,
                needs_review_count=s.needs_review_count,
                low_confidence_count=s.low_confidence_count,
                medium_confidence_count=s.medium_confidence_count,
                high_confidence_count=s.high_confidence_count,
            )
            for s in result.categories
        ],
        total_prpcs=result.total_prpcs,
    )
