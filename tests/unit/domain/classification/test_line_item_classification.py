"""Tests for the LineItemClassification entity."""

from uuid import uuid4

import pytest

from revcat.domain.classification.value_objects import ClassificationStatus
from revcat.domain.shared.exceptions import ErrorCode, ValidationError
from tests.shared.fixtures.database import TEST_REVIEWER_ID
from tests.shared.fixtures.factories import make_classification


class TestLineItemClassificationCreation:
    def test_defaults(self):
        classification = make_classification()

        assert classification.status == ClassificationStatus.INFERRED
        assert classification.last_reviewed_by is None
        assert classification.conflict_flags == frozenset()

    def test_rejects_confidence_outside_unit_interval(self):
        with pytest.raises(ValueError, match="Confidence"):
            make_classification(confidence=1.2)

    def test_prpc_label(self):
        classification = make_classification(
            product_name="Server Pro",
            rate_plan_name="Perpetual",
            charge_name="License",
        )

        assert classification.prpc_label == "Server Pro - Perpetual - License"


class TestReclassify:
    def test_sets_fields_and_stamps_reviewer(self):
        classification = make_classification(category="SaaS", confidence=0.3)

        classification.reclassify(
            category="Hardware",
            pattern_of_business="Point in time",
            rationale="Physical goods",
            reviewer_id=TEST_REVIEWER_ID,
            confidence=0.9,
            source_agent="model-x",
        )

        assert classification.inferred_category == "Hardware"
        assert classification.inferred_pattern_of_business == "Point in time"
        assert classification.rationale == "Physical goods"
        assert classification.confidence == 0.9
        assert classification.source_agent == "model-x"
        assert classification.status == ClassificationStatus.USER_ADJUSTED
        assert classification.last_reviewed_by == TEST_REVIEWER_ID
        assert classification.last_reviewed_at is not None

    def test_none_rationale_keeps_existing(self):
        classification = make_classification(rationale="Original reasoning")

        classification.reclassify("Tech", "Usage", None, reviewer_id=uuid4())

        assert classification.rationale == "Original reasoning"

    def test_rejects_blank_category(self):
        classification = make_classification()

        with pytest.raises(ValidationError):
            classification.reclassify("  ", "POB", None, reviewer_id=uuid4())

    def test_rejects_confidence_out_of_range(self):
        classification = make_classification()

        with pytest.raises(ValidationError):
            classification.reclassify("Tech", "POB", None, uuid4(), confidence=-0.1)


class TestStatusTransitions:
    def test_approve(self):
        classification = make_classification(needs_review=True)

        classification.approve(TEST_REVIEWER_ID)

        assert classification.status == ClassificationStatus.APPROVED
        assert classification.needs_review is False
        assert classification.last_reviewed_by == TEST_REVIEWER_ID

    def test_mark_processing(self):
        classification = make_classification()

        classification.mark_processing()

        assert classification.status == ClassificationStatus.PROCESSING

    def test_cannot_return_to_inferred(self):
        classification = make_classification(status=ClassificationStatus.APPROVED)

        with pytest.raises(ValidationError) as exc_info:
            classification._transition_to(ClassificationStatus.INFERRED)

        assert exc_info.value.code == ErrorCode.INVALID_STATUS_TRANSITION

    def test_snapshot(self):
        classification = make_classification(category="SaaS", confidence=0.5)

        snapshot = classification.snapshot()

        assert snapshot == {
            "category": "SaaS",
            "pob": "Subscription",
            "rationale": "Recurring fee",
            "confidence": 0.5,
            "status": "inferred",
        }
