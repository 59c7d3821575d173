"""Shared pytest fixtures for all test layers."""

from tests.shared.fixtures.classifier import FakeCategoryClassifier
from tests.shared.fixtures.database import (
    TEST_CUSTOMER_ID,
    TEST_CUSTOMER_ID_2,
    TEST_REVIEWER_ID,
    db_session,
    pg_session,
    postgres_container,
    postgres_engine,
    sqlite_engine,
)

__all__ = [
    "TEST_CUSTOMER_ID",
    "TEST_CUSTOMER_ID_2",
    "TEST_REVIEWER_ID",
    "FakeCategoryClassifier",
    "db_session",
    "pg_session",
    "postgres_container",
    "postgres_engine",
    "sqlite_engine",
]
