"""Tests for SubmitCategoryFeedbackCommand.

The pipeline runs against the SQLite repositories; the classifier is a
deterministic fake, or the HTTP adapter on an httpx.MockTransport when the
failure modes of the real endpoint matter.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from revcat.application.commands.classification import SubmitCategoryFeedbackCommand
from revcat.application.services import ClassificationUpdateApplier
from revcat.domain.audit import AuditAction
from revcat.domain.classification.exceptions import (
    ClassifierContractViolationError,
    ClassifierUnavailableError,
)
from revcat.domain.classification.value_objects import (
    ClassificationStatus,
    FeedbackRequest,
)
from revcat.domain.shared.exceptions import DataAccessError, ValidationError
from revcat.infrastructure.integration.ai import ChatCompletionsCategoryClassifier
from tests.shared.fixtures.classifier import FakeCategoryClassifier
from tests.shared.fixtures.database import (
    TEST_CUSTOMER_ID,
    TEST_CUSTOMER_ID_2,
    TEST_REVIEWER_ID,
)
from tests.shared.fixtures.factories import feedback_decision, make_classification


def _make_command(repository_factory, classifier) -> SubmitCategoryFeedbackCommand:
    return SubmitCategoryFeedbackCommand.from_factory(
        repository_factory,
        classifier=classifier,
    )


def _http_classifier(handler) -> ChatCompletionsCategoryClassifier:
    return ChatCompletionsCategoryClassifier(
        api_key="test-key",
        base_url="https://classifier.test/v1",
        model="test-model",
        transport=httpx.MockTransport(handler),
    )


def _tool_call_response(arguments: dict) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "choices": [
                {
                    "message": {
                        "tool_calls": [
                            {
                                "type": "function",
                                "function": {
                                    "name": "categorization_update",
                                    "arguments": json.dumps(arguments),
                                },
                            },
                        ],
                    },
                },
            ],
        },
    )


async def _reload(repository_factory, classification):
    return await repository_factory.classification_repository().find_by_id(
        classification.id,
    )


class TestSubmitCategoryFeedback:
    """Free-text feedback turned into a bulk category change."""

    async def test_servers_become_hardware(self, repository_factory, seed):
        """A matching record is recategorised and marked as user adjusted."""
        server, training = await seed(
            make_classification(product_name="Server Pro", confidence=0.2),
            make_classification(product_name="Training Pack", category="Training"),
        )
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())

        result = await _make_command(repository_factory, classifier).execute(
            FeedbackRequest("servers are hardware not saas", TEST_CUSTOMER_ID),
            actor_id=TEST_REVIEWER_ID,
        )

        assert result.updated_count == 1
        assert result.new_category == "Hardware"
        assert result.pattern == "server"
        assert result.updated_ids == [server.id]

        stored = await _reload(repository_factory, server)
        assert stored.inferred_category == "Hardware"
        assert stored.status == ClassificationStatus.USER_ADJUSTED
        assert stored.rationale == "Servers are physical goods"
        # The bulk path does not stamp reviewer fields
        assert stored.last_reviewed_by is None

        untouched = await _reload(repository_factory, training)
        assert untouched.inferred_category == "Training"
        assert untouched.status == ClassificationStatus.INFERRED

    async def test_writes_audit_entry_per_record_and_catalog_entry(
        self,
        repository_factory,
        seed,
    ):
        server, = await seed(make_classification(product_name="Server Pro"))
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())

        await _make_command(repository_factory, classifier).execute(
            FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID),
            actor_id=TEST_REVIEWER_ID,
        )

        entries = await repository_factory.audit_entry_repository().find_by_customer(
            TEST_CUSTOMER_ID,
        )
        assert len(entries) == 1
        assert entries[0].action == AuditAction.CATEGORY_FEEDBACK
        assert entries[0].entity_id == str(server.id)
        assert entries[0].actor == str(TEST_REVIEWER_ID)

        catalog = repository_factory.category_catalog_repository()
        assert await catalog.find_for_customer(TEST_CUSTOMER_ID, "Hardware") is not None

    async def test_low_confidence_slice_updates_exactly_the_slice(
        self,
        repository_factory,
        seed,
    ):
        """Five of twelve SaaS records are below 0.4; only those five change."""
        low = [
            make_classification(product_name=f"Low {i}", confidence=0.1 + i * 0.05)
            for i in range(5)
        ]
        high = [
            make_classification(product_name=f"High {i}", confidence=0.6 + i * 0.05)
            for i in range(7)
        ]
        other_category = make_classification(
            product_name="Low elsewhere",
            category="Tech",
            confidence=0.1,
        )
        await seed(*low, *high, other_category)
        classifier = FakeCategoryClassifier(
            feedback_decision=feedback_decision(new_category="Tech", pattern="zzz"),
        )

        result = await _make_command(repository_factory, classifier).execute(
            FeedbackRequest(
                "these are really tech",
                TEST_CUSTOMER_ID,
                scope_category="SaaS",
                low_confidence_only=True,
            ),
        )

        assert result.updated_count == 5
        assert set(result.updated_ids) == {c.id for c in low}

        # The classifier only saw the low-confidence slice of SaaS
        _, seen, current_category = classifier.feedback_calls[0]
        assert {c.id for c in seen} == {c.id for c in low}
        assert current_category == "SaaS"

        for classification in high:
            stored = await _reload(repository_factory, classification)
            assert stored.inferred_category == "SaaS"
            assert stored.status == ClassificationStatus.INFERRED

    async def test_blank_pattern_updates_nothing(self, repository_factory, seed):
        classification, = await seed(make_classification(product_name="Server Pro"))
        classifier = FakeCategoryClassifier(
            feedback_decision=feedback_decision(pattern="   "),
        )

        result = await _make_command(repository_factory, classifier).execute(
            FeedbackRequest("make everything hardware", TEST_CUSTOMER_ID),
        )

        assert result.updated_count == 0
        assert result.updated_ids == []
        stored = await _reload(repository_factory, classification)
        assert stored.inferred_category == "SaaS"
        assert (
            await repository_factory.audit_entry_repository().find_by_customer(
                TEST_CUSTOMER_ID,
            )
            == []
        )

    async def test_other_customers_are_never_candidates(self, repository_factory, seed):
        foreign, = await seed(
            make_classification(
                product_name="Server Pro",
                customer_id=TEST_CUSTOMER_ID_2,
            ),
        )
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())

        result = await _make_command(repository_factory, classifier).execute(
            FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID),
        )

        assert result.updated_count == 0
        stored = await _reload(repository_factory, foreign)
        assert stored.inferred_category == "SaaS"

    async def test_same_feedback_twice_is_idempotent(self, repository_factory, seed):
        server, = await seed(make_classification(product_name="Server Pro"))
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())
        command = _make_command(repository_factory, classifier)
        request = FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID)

        first = await command.execute(request)
        after_first = await _reload(repository_factory, server)
        second = await command.execute(request)
        after_second = await _reload(repository_factory, server)

        assert first.updated_count == second.updated_count == 1
        for stored in (after_first, after_second):
            assert stored.inferred_category == "Hardware"
            assert stored.status == ClassificationStatus.USER_ADJUSTED
            assert stored.rationale == "Servers are physical goods"
        entries = await repository_factory.audit_entry_repository().find_by_customer(
            TEST_CUSTOMER_ID,
        )
        assert len(entries) == 2
        assert {e.entity_id for e in entries} == {str(server.id)}


class TestCandidateQueryFailure:
    async def test_store_error_surfaces_and_nothing_is_matched(
        self,
        repository_factory,
        seed,
    ):
        """A failed candidate query is an error, never an empty match."""
        classification, = await seed(make_classification(product_name="Server Pro"))
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())
        command = _make_command(repository_factory, classifier)

        with (
            patch.object(
                repository_factory.classification_repository(),
                "find_candidates",
                AsyncMock(side_effect=DataAccessError("fetch candidate classifications")),
            ),
            pytest.raises(DataAccessError),
        ):
            await command.execute(FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID))

        assert classifier.call_count == 0
        assert (
            await repository_factory.audit_entry_repository().find_by_customer(
                TEST_CUSTOMER_ID,
            )
            == []
        )
        stored = await _reload(repository_factory, classification)
        assert stored.inferred_category == "SaaS"


class TestClassifierFailures:
    """A classifier failure aborts before anything is written."""

    async def test_http_500_is_unavailable_and_writes_nothing(
        self,
        repository_factory,
        seed,
    ):
        classification, = await seed(make_classification(product_name="Server Pro"))
        classifier = _http_classifier(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ClassifierUnavailableError) as exc_info:
            await _make_command(repository_factory, classifier).execute(
                FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID),
            )

        assert exc_info.value.status_code == 500
        stored = await _reload(repository_factory, classification)
        assert stored.inferred_category == "SaaS"
        assert stored.status == ClassificationStatus.INFERRED
        assert (
            await repository_factory.audit_entry_repository().find_by_customer(
                TEST_CUSTOMER_ID,
            )
            == []
        )

    async def test_missing_rationale_is_contract_violation(
        self,
        repository_factory,
        seed,
    ):
        classification, = await seed(make_classification(product_name="Server Pro"))
        classifier = _http_classifier(
            lambda request: _tool_call_response(
                {"new_category": "Hardware", "pattern_to_match": "server"},
            ),
        )

        with pytest.raises(ClassifierContractViolationError):
            await _make_command(repository_factory, classifier).execute(
                FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID),
            )

        stored = await _reload(repository_factory, classification)
        assert stored.inferred_category == "SaaS"
        catalog = repository_factory.category_catalog_repository()
        assert await catalog.find_visible(TEST_CUSTOMER_ID, "Hardware") is None

    async def test_valid_tool_call_over_http(self, repository_factory, seed):
        classification, = await seed(make_classification(product_name="Server Pro"))
        classifier = _http_classifier(
            lambda request: _tool_call_response(
                {
                    "new_category": "Hardware",
                    "pattern_to_match": "server",
                    "rationale": "Physical servers",
                },
            ),
        )

        result = await _make_command(repository_factory, classifier).execute(
            FeedbackRequest("servers are hardware", TEST_CUSTOMER_ID),
        )

        assert result.updated_count == 1
        stored = await _reload(repository_factory, classification)
        assert stored.inferred_category == "Hardware"


class TestEmptyFeedback:
    def test_rejected_before_classifier_is_called(self):
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())

        with pytest.raises(ValidationError, match="Please enter your feedback"):
            FeedbackRequest("", TEST_CUSTOMER_ID)

        assert classifier.call_count == 0


class TestWithMocks:
    async def test_candidate_fetch_uses_request_scope(self):
        classification_repo = AsyncMock()
        classification_repo.find_candidates.return_value = []
        applier = AsyncMock(spec=ClassificationUpdateApplier)
        applier.apply_feedback.return_value = 0
        classifier = FakeCategoryClassifier(feedback_decision=feedback_decision())

        command = SubmitCategoryFeedbackCommand(
            classification_repository=classification_repo,
            classifier=classifier,
            applier=applier,
        )
        await command.execute(
            FeedbackRequest("x", TEST_CUSTOMER_ID, "SaaS", low_confidence_only=True),
        )

        classification_repo.find_candidates.assert_awaited_once_with(
            TEST_CUSTOMER_ID,
            category="SaaS",
            low_confidence_only=True,
        )
        assert applier.apply_feedback.await_args.kwargs["actor"] == "system"

    def test_from_factory(self):
        """Can create command from factory."""
        factory = MagicMock()
        classifier = FakeCategoryClassifier()

        command = SubmitCategoryFeedbackCommand.from_factory(factory, classifier=classifier)

        assert isinstance(command, SubmitCategoryFeedbackCommand)
        factory.classification_repository.assert_called()
