"""Subscription commands - audit flag and attribute corrections."""

from revcat.application.commands.subscription.subscription_review_commands import (
    ProposeSubscriptionCorrectionCommand,
    ToggleSubscriptionAuditCommand,
)

__all__ = [
    "ProposeSubscriptionCorrectionCommand",
    "ToggleSubscriptionAuditCommand",
]
