"""Tests for the Subscription entity."""

from datetime import date
from uuid import uuid4

import pytest

from revcat.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import make_subscription


class TestToggleAudited:
    def test_toggles_and_stamps(self):
        subscription = make_subscription()
        auditor = uuid4()

        assert subscription.toggle_audited(auditor) is True
        assert subscription.audited_by == auditor
        assert subscription.audited_at is not None

        assert subscription.toggle_audited(auditor) is False
        assert subscription.audited is False


class TestApplyCorrection:
    def test_patches_whitelisted_attributes(self):
        subscription = make_subscription()

        subscription.apply_correction(
            {
                "billing_period": " Annual ",
                "has_ramps": True,
                "end_date": "2025-06-30",
            },
        )

        assert subscription.billing_period == "Annual"
        assert subscription.has_ramps is True
        assert subscription.end_date == date(2025, 6, 30)

    def test_end_date_may_be_cleared(self):
        subscription = make_subscription()

        subscription.apply_correction({"end_date": None, "evergreen": True})

        assert subscription.end_date is None
        assert subscription.evergreen is True

    def test_rejects_unknown_attribute(self):
        subscription = make_subscription()

        with pytest.raises(ValidationError, match="subscription_id"):
            subscription.apply_correction({"subscription_id": "SUB-9"})

    def test_rejects_empty_patch(self):
        with pytest.raises(ValidationError):
            make_subscription().apply_correction({})

    @pytest.mark.parametrize(
        "patch",
        [
            {"termed": "yes"},
            {"start_date": "not a date"},
            {"start_date": None},
            {"currency": "  "},
        ],
    )
    def test_rejects_invalid_values(self, patch):
        with pytest.raises(ValidationError):
            make_subscription().apply_correction(patch)

    def test_attribute_values_are_json_friendly(self):
        subscription = make_subscription()

        values = subscription.attribute_values(["start_date", "termed", "unknown"])

        assert values == {"start_date": "2024-01-01", "termed": True}
