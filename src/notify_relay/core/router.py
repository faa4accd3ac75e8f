"""Dispatcher binding requests to queued, retried handler invocations."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from notify_relay.core.retry import RetryPolicy
from notify_relay.models.status import StatusRecord
from notify_relay.utils.logging import correlation_id_context

if TYPE_CHECKING:
    from notify_relay.core.context import RelayContext
    from notify_relay.types.aliases import Payload

logger = logging.getLogger(__name__)


class ServiceRouter:
    """One submitted notification request.

    Creating a router enqueues a job whose action invokes the named handler
    under the context's retry policy, and records the job's status record
    before returning. Use :meth:`create`; the constructor alone does not
    submit anything.
    """

    def __init__(self, context: RelayContext, service_name: str, payload: Payload) -> None:
        """Initialize an unsubmitted router.

        Args:
            context: Registry, queue, status store and configuration to use
            service_name: Registered handler name
            payload: Request data handed to the handler
        """
        self.context: RelayContext = context
        self.service_name: str = service_name
        self.payload: Payload = payload
        self.retry_policy: RetryPolicy = RetryPolicy(
            max_retries=context.config.queue.max_retries,
            delay=context.config.queue.retry_delay,
        )
        self.id: str = ""
        self._initial_written: asyncio.Event = asyncio.Event()

    @classmethod
    async def create(cls, context: RelayContext, service_name: str, payload: Payload) -> ServiceRouter:
        """Submit a request and persist its initial status record.

        The job id and its position are taken synchronously right after
        enqueueing, before anything can run; the initial record write is
        awaited before returning.

        Args:
            context: Registry, queue, status store and configuration to use
            service_name: Registered handler name
            payload: Request data handed to the handler

        Returns:
            The submitted router
        """
        router = cls(context, service_name, payload)
        await router._submit()
        return router

    async def _submit(self) -> None:
        self.id = self.context.queue.enqueue(self.payload, self._run)
        position = self.get_position()
        try:
            await self.context.store.set(self.id, StatusRecord.pending(position).to_store())
        finally:
            self._initial_written.set()

        logger.info(
            "Queued %s job %s at position %s",
            self.service_name, self.id, position,
            extra={"job_id": self.id, "service": self.service_name},
        )

    def get_id(self) -> str:
        """Public job identifier."""
        return self.id

    def get_position(self) -> int | None:
        """One-based rank among pending jobs, or None once the job started."""
        position = self.context.queue.position_of(self.id)
        return None if position is None else position + 1

    async def _run(self, payload: Payload) -> object:
        with correlation_id_context(self.id):
            try:
                result = await self.retry_policy.run(
                    lambda: self._invoke(payload),
                    name=self.service_name,
                )
                await self._write_terminal(StatusRecord.succeeded(result))
            except Exception as e:
                logger.error(
                    "Job %s for service %s failed permanently: %s",
                    self.id, self.service_name, e,
                    extra={"job_id": self.id, "service": self.service_name},
                )
                await self._write_terminal(StatusRecord.gave_up(e))
                raise

            logger.info("Job %s for service %s completed", self.id, self.service_name)
            return result

    async def _invoke(self, payload: Payload) -> object:
        handler = self.context.registry.lookup(self.service_name)
        return await handler(payload)

    async def _write_terminal(self, record: StatusRecord) -> None:
        # The initial record must land first or it would overwrite this one
        _ = await self._initial_written.wait()
        await self.context.store.set(self.id, record.to_store())

    @staticmethod
    async def lookup_status(context: RelayContext, job_id: str) -> StatusRecord | None:
        """Read a job's status record, refreshing the position of pending jobs.

        Terminal records are returned exactly as stored.

        Args:
            context: Context whose store and queue to consult
            job_id: Job identifier

        Returns:
            The status record, or None if the id has no record
        """
        raw = await context.store.get(job_id)
        if raw is None:
            return None

        record = StatusRecord.model_validate(raw)
        if not record.is_terminal:
            live = context.queue.position_of(job_id)
            record.position = None if live is None else live + 1
        return record
