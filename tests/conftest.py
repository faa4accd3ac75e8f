"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from notify_relay.config.models.main import RelayConfig
from notify_relay.config.models.queue import QueueConfig
from notify_relay.core.context import RelayContext
from notify_relay.store.memory import MemoryStatusStore


@pytest.fixture
def fast_config() -> RelayConfig:
    """Relay configuration with a near-zero retry delay."""
    return RelayConfig(queue=QueueConfig(max_retries=3, retry_delay=0.001))


@pytest.fixture
def memory_store() -> MemoryStatusStore:
    """Empty in-memory status store under the default namespace."""
    return MemoryStatusStore().namespace("service")


@pytest_asyncio.fixture
async def relay_context(
    fast_config: RelayConfig,
    memory_store: MemoryStatusStore,
) -> AsyncGenerator[RelayContext, None]:
    """Relay context backed by the in-memory store, drained on teardown."""
    context = RelayContext(fast_config, store=memory_store)
    yield context
    await context.queue.join()
