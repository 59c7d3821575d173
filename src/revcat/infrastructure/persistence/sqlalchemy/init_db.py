"""Database engine and schema utilities."""

import asyncio
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import revcat.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from revcat.infrastructure.persistence.sqlalchemy.models.base import Base
from revcat_config.settings import get_settings

logger = logging.getLogger(__name__)


def create_database_engine(database_url: str, **kwargs) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Repository writes run inside SAVEPOINTs. The sqlite driver manages
    transactions itself and would end the outer transaction when the
    first savepoint is released, so for SQLite the driver's handling is
    disabled and BEGIN is emitted explicitly.
    """
    engine = create_async_engine(database_url, echo=False, **kwargs)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _disable_driver_transactions(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, "begin")
        def _emit_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    return create_database_engine(get_settings().database_url, pool_pre_ping=True)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


def db_init():
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_tables())
