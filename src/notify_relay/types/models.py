"""Data models for the job queue.

This module defines the slot dataclasses owned by the job queue while a
job is pending.
"""

from dataclasses import dataclass, field
from enum import Enum

from notify_relay.types.aliases import JobAction, Payload, UpdateCallback


class SubscriptionStatus(Enum):
    """Lifecycle of an update subscription."""

    PENDING = "pending"
    DONE = "done"


@dataclass(slots=True)
class Job:
    """One queued unit of work.

    Owned exclusively by the job queue until its action has been awaited,
    then discarded.
    """

    id: str
    payload: Payload
    action: JobAction | None


@dataclass(slots=True)
class UpdateSubscription:
    """Listener notified as a job moves up the queue or leaves it."""

    job_id: str
    callback: UpdateCallback
    status: SubscriptionStatus = field(default=SubscriptionStatus.PENDING)
