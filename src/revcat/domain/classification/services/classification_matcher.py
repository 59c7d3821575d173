"""Select which classifications a feedback decision applies to.

Two policies:
1. Low-confidence slice of one category: every candidate in the slice is
   updated; the pattern returned by the classifier is ignored.
2. Otherwise: candidates whose product, rate-plan or charge name contains
   the pattern (case-insensitive, unanchored). A blank pattern matches
   nothing.
"""

from __future__ import annotations

import logging
from typing import Sequence

from revcat.domain.classification.entities import LineItemClassification
from revcat.domain.classification.value_objects import FeedbackRequest, MatchResult

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 10_000


class ClassificationMatcher:
    """Resolves a feedback request and a pattern into record ids."""

    def match(
        self,
        candidates: Sequence[LineItemClassification],
        pattern: str,
        request: FeedbackRequest,
    ) -> MatchResult:
        if request.is_bulk_slice_update:
            logger.debug(
                "Bulk slice update for category '%s': %d candidates",
                request.scope_category,
                len(candidates),
            )
            return MatchResult(ids=tuple(c.id for c in candidates))

        return self.match_pattern(candidates, pattern)

    def match_pattern(
        self,
        candidates: Sequence[LineItemClassification],
        pattern: str,
    ) -> MatchResult:
        # "" is a substring of everything; never let it select a whole dataset
        if not pattern or not pattern.strip():
            logger.warning("Blank match pattern, no classifications selected")
            return MatchResult(ids=())

        matched = tuple(c.id for c in candidates if c.name_contains(pattern))
        logger.debug(
            "Pattern '%s' matched %d of %d candidates",
            pattern,
            len(matched),
            len(candidates),
        )
        return MatchResult(ids=matched)
