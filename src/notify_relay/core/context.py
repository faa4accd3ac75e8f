"""Explicit context object wiring the dispatch engine together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notify_relay.config.models.main import RelayConfig
from notify_relay.core.queue import JobQueue
from notify_relay.core.registry import ServiceRegistry
from notify_relay.core.router import ServiceRouter
from notify_relay.store import create_status_store

if TYPE_CHECKING:
    from notify_relay.models.status import StatusRecord
    from notify_relay.types.aliases import Handler, Payload
    from notify_relay.types.protocols import StatusStore

logger = logging.getLogger(__name__)


class RelayContext:
    """Registry, queue, status store and configuration of one relay instance.

    Passed into every :class:`ServiceRouter`; independent contexts share no
    state, so tests and embedders can run several side by side.
    """

    def __init__(
        self,
        config: RelayConfig | None = None,
        registry: ServiceRegistry | None = None,
        store: StatusStore | None = None,
    ) -> None:
        """Initialize the context.

        Args:
            config: Relay configuration, defaults if omitted
            registry: Handler registry, a new empty one if omitted
            store: Status store, built from ``config.store`` if omitted
        """
        self.config: RelayConfig = config or RelayConfig()
        self.registry: ServiceRegistry = registry or ServiceRegistry()
        self.queue: JobQueue = JobQueue(concurrency=self.config.queue.concurrency)
        self.store: StatusStore = store if store is not None else create_status_store(self.config.store)
        logger.debug(
            "Relay context ready (store=%s, max_retries=%d, concurrency=%d)",
            type(self.store).__name__, self.config.queue.max_retries, self.queue.concurrency,
        )

    def register(self, name: str, handler: Handler) -> None:
        """Register a handler under ``name``."""
        self.registry.register(name, handler)

    async def dispatch(self, service_name: str, payload: Payload) -> ServiceRouter:
        """Submit a request to ``service_name``."""
        return await ServiceRouter.create(self, service_name, payload)

    async def lookup_status(self, job_id: str) -> StatusRecord | None:
        """Read a job's status record."""
        return await ServiceRouter.lookup_status(self, job_id)

    async def close(self) -> None:
        """Wait for pending jobs, then release the status store."""
        await self.queue.join()
        await self.store.close()
