"""Job queue, registry, retry and dispatch engine."""

from __future__ import annotations

from .context import RelayContext
from .exceptions import (
    InvalidPayloadError,
    NotifyRelayError,
    RetryExhaustedError,
    ServiceNotFoundError,
    StatusStoreError,
)
from .queue import JobQueue
from .registry import ServiceRegistry
from .retry import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, RetryPolicy
from .router import ServiceRouter

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "InvalidPayloadError",
    "JobQueue",
    "NotifyRelayError",
    "RelayContext",
    "RetryExhaustedError",
    "RetryPolicy",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "ServiceRouter",
    "StatusStoreError",
]
