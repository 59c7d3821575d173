"""
Fixtures for repository tests against PostgreSQL.

Requires Docker. Run with --run-integration or RUN_INTEGRATION=1.
"""

from tests.shared.fixtures.database import (
    pg_session,
    postgres_container,
    postgres_engine,
)

__all__ = ["pg_session", "postgres_container", "postgres_engine"]
