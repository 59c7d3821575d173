"""Classification queries."""

from revcat.application.queries.classification.category_stats_query import (
    GetCategoryStatsQuery,
)

__all__ = ["GetCategoryStatsQuery"]
