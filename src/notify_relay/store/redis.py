"""Redis-backed status store.

Keys are ``<namespace>:<job id>``, values are JSON documents, and an
optional expiration is applied on every write.
"""

from __future__ import annotations

import json
import logging
from typing import Self, cast

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from notify_relay.core.exceptions import StatusStoreError

logger = logging.getLogger(__name__)


class RedisStatusStore:
    """Status store persisting records in Redis."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        expiration: int = 0,
        client: aioredis.Redis | None = None,
    ) -> None:
        """Initialize the Redis store.

        Args:
            host: Redis host
            port: Redis port
            db: Redis database index
            password: Optional Redis password
            expiration: Seconds before records expire, 0 to keep forever
            client: Pre-built client, mainly for tests
        """
        self.connection: aioredis.Redis = client or aioredis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5,
        )
        self.expiration: int = expiration
        self.namespace_key: str | None = None
        logger.info("Redis status store configured: %s:%s db=%s", host, port, db)

    def namespace(self, prefix: str) -> Self:
        """Scope subsequent keys under ``prefix``."""
        self.namespace_key = prefix
        return self

    def _key(self, key: str) -> str:
        return f"{self.namespace_key}:{key}" if self.namespace_key else key

    async def get(self, key: str) -> dict[str, object] | None:
        try:
            raw = cast(str | None, await self.connection.get(self._key(key)))
        except RedisError as e:
            raise StatusStoreError(f"Redis get failed for {key}: {e}", key) from e

        if not raw:
            return None
        try:
            return cast(dict[str, object], json.loads(raw))
        except json.JSONDecodeError as e:
            raise StatusStoreError(f"Corrupt status record for {key}: {e}", key) from e

    async def set(self, key: str, value: dict[str, object]) -> None:
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StatusStoreError(f"Value for {key} is not JSON serializable: {e}", key) from e

        try:
            if self.expiration:
                _ = await self.connection.set(self._key(key), encoded, ex=self.expiration)
            else:
                _ = await self.connection.set(self._key(key), encoded)
        except RedisError as e:
            raise StatusStoreError(f"Redis set failed for {key}: {e}", key) from e

    async def delete(self, key: str) -> None:
        try:
            _ = await self.connection.delete(self._key(key))
        except RedisError as e:
            raise StatusStoreError(f"Redis delete failed for {key}: {e}", key) from e

    async def close(self) -> None:
        await self.connection.aclose()
