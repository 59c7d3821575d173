"""Subscription domain entities."""

from revcat.domain.subscription.entities.subscription import (
    CORRECTABLE_ATTRIBUTES,
    Subscription,
)

__all__ = ["CORRECTABLE_ATTRIBUTES", "Subscription"]
