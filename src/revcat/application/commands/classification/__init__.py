"""Classification commands - feedback, reclassification and category upkeep."""

from revcat.application.commands.classification.category_operation_commands import (
    MergeCategoryCommand,
    RenameCategoryCommand,
)
from revcat.application.commands.classification.correct_classification_command import (
    ApproveClassificationCommand,
    CorrectClassificationCommand,
)
from revcat.application.commands.classification.reclassify_item_command import (
    ReclassifyItemCommand,
)
from revcat.application.commands.classification.submit_category_feedback_command import (
    SubmitCategoryFeedbackCommand,
)

__all__ = [
    # Classifier-driven
    "ReclassifyItemCommand",
    "SubmitCategoryFeedbackCommand",
    # Manual review
    "ApproveClassificationCommand",
    "CorrectClassificationCommand",
    # Category upkeep
    "MergeCategoryCommand",
    "RenameCategoryCommand",
]
