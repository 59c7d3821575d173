"""Command layer - write operations that mutate state.

Commands represent analyst intentions to change stored classifications.
Each one writes its audit entries itself; commit and rollback happen in
the presentation layer.

Commands are organized by domain:
- classification: PRPC feedback, reclassification and category upkeep
- subscription: subscription audit flag and corrections
"""

from revcat.application.commands.classification import (
    ApproveClassificationCommand,
    CorrectClassificationCommand,
    MergeCategoryCommand,
    ReclassifyItemCommand,
    RenameCategoryCommand,
    SubmitCategoryFeedbackCommand,
)
from revcat.application.commands.subscription import (
    ProposeSubscriptionCorrectionCommand,
    ToggleSubscriptionAuditCommand,
)

__all__ = [
    # Classification
    "ApproveClassificationCommand",
    "CorrectClassificationCommand",
    "MergeCategoryCommand",
    "ReclassifyItemCommand",
    "RenameCategoryCommand",
    "SubmitCategoryFeedbackCommand",
    # Subscription
    "ProposeSubscriptionCorrectionCommand",
    "ToggleSubscriptionAuditCommand",
]
