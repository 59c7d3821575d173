"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import make_classification

    classification = make_classification(product_name="Server Pro")
"""

from datetime import date
from typing import Optional
from uuid import UUID

from revcat.domain.classification.entities import (
    CategoryCatalogEntry,
    LineItemClassification,
)
from revcat.domain.classification.value_objects import (
    AmortizationTechnique,
    CategoryFeedbackDecision,
    ClassificationStatus,
    ReclassificationDecision,
    RevenueRecognitionTiming,
)
from revcat.domain.subscription import Subscription
from tests.shared.fixtures.database import TEST_CUSTOMER_ID

_counter = {"prpc": 0}


def make_classification(  # noqa: PLR0913
    product_name: str = "Platform",
    rate_plan_name: str = "Annual Plan",
    charge_name: str = "Subscription Fee",
    category: Optional[str] = "SaaS",
    confidence: Optional[float] = 0.8,
    status: ClassificationStatus = ClassificationStatus.INFERRED,
    customer_id: UUID = TEST_CUSTOMER_ID,
    rationale: Optional[str] = "Recurring fee",
    pattern_of_business: Optional[str] = "Subscription",
    needs_review: bool = False,
) -> LineItemClassification:
    _counter["prpc"] += 1
    return LineItemClassification(
        customer_id=customer_id,
        prpc_id=f"PRPC-{_counter['prpc']:05d}",
        product_name=product_name,
        rate_plan_name=rate_plan_name,
        charge_name=charge_name,
        inferred_category=category,
        inferred_pattern_of_business=pattern_of_business,
        confidence=confidence,
        status=status,
        rationale=rationale,
        needs_review=needs_review,
    )


def make_subscription(
    customer_id: UUID = TEST_CUSTOMER_ID,
    subscription_id: str = "SUB-0001",
    **overrides,
) -> Subscription:
    values = {
        "billing_period": "Monthly",
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "termed": True,
        "confidence": 0.75,
        "derivation_trace": {"termed": "end date present"},
    }
    values.update(overrides)
    return Subscription(customer_id=customer_id, subscription_id=subscription_id, **values)


def make_catalog_entry(
    category_name: str,
    customer_id: Optional[UUID] = TEST_CUSTOMER_ID,
) -> CategoryCatalogEntry:
    return CategoryCatalogEntry(
        category_name=category_name,
        pattern_of_business_name=f"{category_name} POB",
        customer_id=customer_id,
    )


def feedback_decision(
    new_category: str = "Hardware",
    pattern: str = "server",
    rationale: str = "Servers are physical goods",
) -> CategoryFeedbackDecision:
    return CategoryFeedbackDecision(
        new_category=new_category,
        pattern_to_match=pattern,
        rationale=rationale,
    )


def reclassification_decision(
    category: str = "Hardware One Time",
    confidence: float = 0.87,
) -> ReclassificationDecision:
    return ReclassificationDecision(
        category=category,
        pattern_of_business="Point in time delivery",
        revenue_recognition_timing=RevenueRecognitionTiming.UPON_BOOKING,
        amortization_technique=AmortizationTechnique.IMMEDIATE,
        rationale="One-time charge on a physical product",
        confidence=confidence,
    )
