"""SQLAlchemy classification adapters (read side)."""

from revcat.infrastructure.persistence.sqlalchemy.adapters.classification.sqlalchemy_category_stats_read_adapter import (  # NOQA: E501
    SqlAlchemyCategoryStatsReadAdapter,
)

__all__ = ["SqlAlchemyCategoryStatsReadAdapter"]
