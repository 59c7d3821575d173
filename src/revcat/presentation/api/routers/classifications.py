"""Classifications router: single-PRPC review actions."""

import logging
from uuid import UUID

from fastapi import APIRouter

from revcat.application.commands.classification import (
    ApproveClassificationCommand,
    CorrectClassificationCommand,
    ReclassifyItemCommand,
)
from revcat.presentation.api.dependencies import Classifier, RepoFactory
from revcat.presentation.api.schemas.classifications import (
    ApproveClassificationRequest,
    ClassificationResponse,
    CorrectClassificationRequest,
    ReclassifyRequest,
    ReclassifyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{classification_id}/reclassify",
    summary="Reclassify a PRPC with the AI classifier",
    responses={
        200: {"description": "New classification"},
        400: {"description": "Empty feedback"},
        404: {"description": "Classification not found"},
        502: {"description": "Classifier answered without a valid tool call"},
        503: {"description": "Classifier or database unavailable"},
    },
)
async def reclassify_item(
    classification_id: UUID,
    request: ReclassifyRequest,
    factory: RepoFactory,
    classifier: Classifier,
) -> ReclassifyResponse:
    """
    Send the current classification and the analyst's feedback to the
    classifier and store its answer.

    `xp_earned` is the classifier's confidence times 100, rounded.
    """
    command = ReclassifyItemCommand.from_factory(factory, classifier=classifier)

    try:
        result = await command.execute(
            classification_id=classification_id,
            feedback=request.feedback,
            reviewer_id=request.reviewer_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ReclassifyResponse(
        classification=ClassificationResponse.from_entity(result.classification),
        xp_earned=result.xp_earned,
        revenue_recognition_timing=result.revenue_recognition_timing,
        amortization_technique=result.amortization_technique,
    )


@router.post(
    "/{classification_id}/correct",
    summary="Reclassify a PRPC by hand",
    responses={
        200: {"description": "Classification corrected"},
        400: {"description": "Missing category, pattern of business or reason"},
        404: {"description": "Classification not found"},
    },
)
async def correct_classification(
    classification_id: UUID,
    request: CorrectClassificationRequest,
    factory: RepoFactory,
) -> ClassificationResponse:
    command = CorrectClassificationCommand.from_factory(factory)

    try:
        classification = await command.execute(
            classification_id=classification_id,
            category=request.category,
            pattern_of_business=request.pattern_of_business,
            reason=request.reason,
            reviewer_id=request.reviewer_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ClassificationResponse.from_entity(classification)


@router.post(
    "/{classification_id}/approve",
    summary="Approve a PRPC classification",
    responses={
        200: {"description": "Classification approved"},
        404: {"description": "Classification not found"},
    },
)
async def approve_classification(
    classification_id: UUID,
    request: ApproveClassificationRequest,
    factory: RepoFactory,
) -> ClassificationResponse:
    command = ApproveClassificationCommand.from_factory(factory)

    try:
        classification = await command.execute(
            classification_id=classification_id,
            reviewer_id=request.reviewer_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ClassificationResponse.from_entity(classification)
