"""Status store backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .memory import MemoryStatusStore
from .redis import RedisStatusStore

if TYPE_CHECKING:
    from notify_relay.config.models.main import StoreConfig
    from notify_relay.types.protocols import StatusStore

__all__ = [
    "MemoryStatusStore",
    "RedisStatusStore",
    "create_status_store",
]


def create_status_store(config: StoreConfig) -> StatusStore:
    """Build the configured status store, already namespaced.

    Args:
        config: Store section of the relay configuration

    Returns:
        Memory or Redis store scoped under ``config.namespace``
    """
    store: StatusStore
    if config.backend == "redis":
        store = RedisStatusStore(
            host=config.host,
            port=config.port,
            db=config.db,
            password=config.password,
            expiration=config.expiration,
        )
    else:
        store = MemoryStatusStore()
    return store.namespace(config.namespace)
