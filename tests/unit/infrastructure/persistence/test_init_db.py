"""Tests for engine creation and schema setup."""

from sqlalchemy import inspect, text
from sqlalchemy.pool import StaticPool

from revcat.infrastructure.persistence.sqlalchemy.init_db import (
    create_database_engine,
    create_tables,
)


def _memory_engine():
    return create_database_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


async def test_create_tables_is_idempotent():
    engine = _memory_engine()

    await create_tables(engine)
    await create_tables(engine)

    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda c: set(inspect(c).get_table_names()))
    await engine.dispose()

    assert {
        "audit_log",
        "prpc_inferences",
        "product_category_catalog",
        "subscription_coverage_candidates",
        "subscriptions",
    } <= tables


async def test_sqlite_savepoint_rollback_keeps_outer_transaction():
    """Rolling back a savepoint must not end the enclosing transaction."""
    engine = _memory_engine()
    async with engine.begin() as conn:
        await conn.execute(text("CREATE TABLE t (x INTEGER)"))

    async with engine.connect() as conn:
        await conn.begin()
        await conn.execute(text("INSERT INTO t VALUES (1)"))
        nested = await conn.begin_nested()
        await conn.execute(text("INSERT INTO t VALUES (2)"))
        await nested.rollback()
        await conn.commit()

    async with engine.connect() as conn:
        rows = (await conn.execute(text("SELECT x FROM t"))).scalars().all()
    await engine.dispose()

    assert rows == [1]
