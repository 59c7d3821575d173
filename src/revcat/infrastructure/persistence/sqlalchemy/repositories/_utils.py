"""Shared utilities for SQLAlchemy repositories."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError

from revcat.domain.shared.exceptions import DataAccessError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_data_errors(operation: str) -> AsyncIterator[None]:
    """
    Re-raise SQLAlchemy failures as DataAccessError.

    Callers above the repositories never see driver or ORM exceptions.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.warning("Data access failed (%s): %s", operation, exc)
        raise DataAccessError(
            operation,
            details={"error": type(exc).__name__},
        ) from exc
