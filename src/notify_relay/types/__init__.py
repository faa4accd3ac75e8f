"""Type definitions and protocols for notify-relay.

This package provides:
- Data models (slot dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from notify_relay.types.aliases import (
    Handler,
    JobAction,
    Payload,
    UpdateCallback,
)
from notify_relay.types.models import (
    Job,
    SubscriptionStatus,
    UpdateSubscription,
)
from notify_relay.types.protocols import StatusStore

__all__ = [
    # Type aliases
    "Handler",
    "JobAction",
    "Payload",
    "UpdateCallback",
    # Data models
    "Job",
    "SubscriptionStatus",
    "UpdateSubscription",
    # Protocols
    "StatusStore",
]
