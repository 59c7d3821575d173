"""Application services."""

from revcat.application.services.classification_update_applier import (
    ClassificationUpdateApplier,
)

__all__ = ["ClassificationUpdateApplier"]
