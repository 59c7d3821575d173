"""SQLAlchemy adapters - implementations of application ports."""

from revcat.infrastructure.persistence.sqlalchemy.adapters.classification import (
    SqlAlchemyCategoryStatsReadAdapter,
)

__all__ = ["SqlAlchemyCategoryStatsReadAdapter"]
