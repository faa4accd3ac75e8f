"""FIFO job queue with a bounded-width drain loop."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections import deque
from typing import TYPE_CHECKING

from notify_relay.types.models import Job, SubscriptionStatus, UpdateSubscription

if TYPE_CHECKING:
    from notify_relay.types.aliases import JobAction, Payload, UpdateCallback


logger = logging.getLogger(__name__)


class JobQueue:
    """Ordered pending-job list drained by a single background loop.

    Jobs start in strict enqueue order. At most ``concurrency`` job actions
    are in flight at once; the default of 1 serializes every handler call.
    A job that raises is logged and dropped, and draining continues with
    the next job.
    """

    def __init__(self, concurrency: int = 1) -> None:
        """Initialize an empty job queue.

        Args:
            concurrency: Maximum number of job actions awaited at once
        """
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")

        self.concurrency: int = concurrency
        self._jobs: deque[Job] = deque()
        self._in_flight: set[str] = set()
        self._subscriptions: list[UpdateSubscription] = []
        self._draining: bool = False
        self._drain_task: asyncio.Task[None] | None = None
        self._idle: asyncio.Event = asyncio.Event()
        self._idle.set()

    @property
    def draining(self) -> bool:
        """Whether the drain loop is currently running."""
        return self._draining

    def enqueue(self, payload: Payload, action: JobAction | None) -> str:
        """Append a job to the tail of the queue.

        Never blocks: the drain loop is scheduled on the running event loop
        and only starts once the caller yields.

        Args:
            payload: Data passed to ``action`` when the job runs
            action: Async callable invoked with ``payload``

        Returns:
            The freshly generated job id
        """
        job = Job(id=str(uuid.uuid4()), payload=payload, action=action)
        self._jobs.append(job)
        self._idle.clear()
        logger.debug("Enqueued job %s (queue size: %d)", job.id, len(self._jobs))

        if not self._draining and (self._drain_task is None or self._drain_task.done()):
            self._drain_task = asyncio.get_running_loop().create_task(self.drain())

        return job.id

    async def drain(self) -> None:
        """Process pending jobs until the queue is empty.

        Re-entrant calls while a drain is in progress return immediately.
        """
        if self._draining:
            return

        self._draining = True
        running: set[asyncio.Task[None]] = set()
        try:
            while self._jobs or running:
                while self._jobs and len(running) < self.concurrency:
                    job = self._jobs.popleft()
                    self._in_flight.add(job.id)
                    self._notify_positions()
                    running.add(asyncio.create_task(self._process(job)))

                _, running = await asyncio.wait(running, return_when=asyncio.FIRST_COMPLETED)
        finally:
            self._draining = False
            if not self._jobs:
                self._idle.set()

        logger.debug("Queue drained")

    async def join(self) -> None:
        """Wait until every enqueued job has been processed."""
        _ = await self._idle.wait()

    def size(self) -> int:
        """Number of jobs waiting to start."""
        return len(self._jobs)

    def position_of(self, job_id: str) -> int | None:
        """Zero-based index of a pending job.

        Args:
            job_id: Job id returned by :meth:`enqueue`

        Returns:
            Index in the pending list, or None once the job started or if the
            id is unknown
        """
        for index, job in enumerate(self._jobs):
            if job.id == job_id:
                return index
        return None

    def is_known(self, job_id: str) -> bool:
        """Whether the job is still pending or currently running."""
        return job_id in self._in_flight or self.position_of(job_id) is not None

    def subscribe(self, job_id: str, callback: UpdateCallback) -> UpdateSubscription:
        """Register a listener for a job's position changes.

        ``callback(job_id, position)`` fires with the one-based position each
        time jobs ahead of it start, and with ``None`` once the job has left
        the queue. Subscribing to an unknown or finished job fires the final
        notification immediately.

        Args:
            job_id: Job to follow
            callback: Listener invoked with ``(job_id, position)``

        Returns:
            The subscription record
        """
        subscription = UpdateSubscription(job_id=job_id, callback=callback)
        if not self.is_known(job_id):
            self._fire(subscription, None)
            return subscription

        self._subscriptions.append(subscription)
        return subscription

    async def _process(self, job: Job) -> None:
        try:
            if job.action is None:
                raise TypeError(f"Job {job.id} has no action")
            _ = await job.action(job.payload)
        except Exception as e:
            logger.error("Error processing queue item: %s", e, extra={"job_id": job.id})
        finally:
            self._in_flight.discard(job.id)
            self._notify_finished(job.id)

    def _notify_positions(self) -> None:
        for subscription in self._subscriptions:
            position = self.position_of(subscription.job_id)
            if position is not None:
                self._call(subscription, position + 1)

    def _notify_finished(self, job_id: str) -> None:
        for subscription in self._subscriptions:
            if subscription.job_id == job_id:
                self._fire(subscription, None)
        self._prune()

    def _fire(self, subscription: UpdateSubscription, position: int | None) -> None:
        self._call(subscription, position)
        subscription.status = SubscriptionStatus.DONE

    def _call(self, subscription: UpdateSubscription, position: int | None) -> None:
        try:
            subscription.callback(subscription.job_id, position)
        except Exception:
            logger.exception("Update callback failed for job %s", subscription.job_id)

    def _prune(self) -> None:
        self._subscriptions = [
            s for s in self._subscriptions if s.status is SubscriptionStatus.PENDING
        ]
