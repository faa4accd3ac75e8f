"""Notify Relay - queued email, SMS and chat-bot notifications.

This package accepts notification requests, queues them in order,
dispatches them one at a time to named handlers with bounded retries,
and records each job's outcome for polling by job id.
"""

from notify_relay.core import (
    JobQueue,
    RelayContext,
    RetryExhaustedError,
    ServiceNotFoundError,
    ServiceRegistry,
    ServiceRouter,
)
from notify_relay.models import StatusRecord

__all__ = [
    "JobQueue",
    "RelayContext",
    "RetryExhaustedError",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "ServiceRouter",
    "StatusRecord",
]
