"""Actions recorded in the audit trail."""

from enum import Enum


class AuditAction(Enum):
    """Mutating operations that produce an audit entry."""

    CATEGORY_FEEDBACK = "ai_category_feedback"
    AI_RECLASSIFY = "ai_reclassify"
    RECLASSIFY = "reclassify"
    APPROVE = "approve"
    RENAME_CATEGORY = "rename_category"
    MERGE_CATEGORY = "merge_category"
    TOGGLE_AUDIT = "toggle_audit"
    PROPOSE_CORRECTION = "propose_correction"


# Actor recorded when no analyst id accompanies a request
SYSTEM_ACTOR = "system"
