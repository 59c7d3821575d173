"""Review status of a line-item classification."""

from enum import Enum


class ClassificationStatus(Enum):
    """Lifecycle of a PRPC classification.

    INFERRED is the state written by the upstream inference job. Once a
    record has left it, nothing in this service moves it back.
    """

    INFERRED = "inferred"
    USER_ADJUSTED = "user_adjusted"
    APPROVED = "approved"
    PROCESSING = "processing"

    @property
    def is_reviewed(self) -> bool:
        return self in (ClassificationStatus.USER_ADJUSTED, ClassificationStatus.APPROVED)
