"""Application ports (read side)."""

from revcat.application.ports.category_stats_read_port import CategoryStatsReadPort

__all__ = ["CategoryStatsReadPort"]
