"""Category classifier interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from revcat.domain.classification.entities import LineItemClassification
from revcat.domain.classification.value_objects import (
    CategoryFeedbackDecision,
    ReclassificationDecision,
)

PROMPT_SAMPLE_SIZE = 100


class CategoryClassifier(ABC):
    """Abstract interface to the external language-model classifier.

    The model is an opaque black box. Implementations send exactly one
    request per call and either return a validated decision or raise
    ClassifierUnavailableError / ClassifierContractViolationError. They
    never write to storage.
    """

    @abstractmethod
    async def classify_feedback(
        self,
        feedback: str,
        candidates: Sequence[LineItemClassification],
        current_category: Optional[str] = None,
    ) -> CategoryFeedbackDecision:
        """
        Turn free-text feedback into a bulk category change.

        Parameters
        ----------
        feedback
            The analyst's correction in natural language
        candidates
            Classifications in scope; at most PROMPT_SAMPLE_SIZE of them
            are shown to the model
        current_category
            Category the analyst was looking at, if any

        Returns
        -------
        CategoryFeedbackDecision with the new category, the pattern that
        selects affected PRPCs and the model's rationale.
        """

    @abstractmethod
    async def reclassify_item(
        self,
        classification: LineItemClassification,
        feedback: str,
    ) -> ReclassificationDecision:
        """
        Produce a new classification for a single PRPC.

        Parameters
        ----------
        classification
            The classification the analyst disagrees with
        feedback
            Why the analyst disagrees

        Returns
        -------
        ReclassificationDecision including POB, timing, technique and a
        confidence between 0 and 1.
        """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """
        Identifier of the model behind the classifier.

        Used for logging and stored as source agent on reclassified rows.
        """
