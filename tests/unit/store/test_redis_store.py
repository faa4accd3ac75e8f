"""Tests for the Redis status store."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from notify_relay.config.models.queue import StoreConfig
from notify_relay.core.exceptions import StatusStoreError
from notify_relay.store import create_status_store
from notify_relay.store.memory import MemoryStatusStore
from notify_relay.store.redis import RedisStatusStore


@pytest.fixture
def client() -> MagicMock:
    """Mock asyncio Redis client."""
    mock = MagicMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.delete = AsyncMock(return_value=1)
    mock.aclose = AsyncMock()
    return mock


class TestRedisStatusStore:
    """Test suite for RedisStatusStore."""

    @pytest.mark.asyncio
    async def test_set_writes_namespaced_json(self, client: MagicMock) -> None:
        """Test values are JSON encoded under ``namespace:key``."""
        store = RedisStatusStore(client=client).namespace("service")

        await store.set("abc", {"completed": False, "position": 1})

        client.set.assert_awaited_once_with(
            "service:abc", json.dumps({"completed": False, "position": 1})
        )

    @pytest.mark.asyncio
    async def test_set_applies_expiration(self, client: MagicMock) -> None:
        """Test a configured expiration is passed as ``ex``."""
        store = RedisStatusStore(expiration=3600, client=client)

        await store.set("abc", {"completed": True})

        client.set.assert_awaited_once_with("abc", json.dumps({"completed": True}), ex=3600)

    @pytest.mark.asyncio
    async def test_get_decodes_json(self, client: MagicMock) -> None:
        """Test stored JSON is decoded into a dictionary."""
        client.get.return_value = json.dumps({"completed": True, "data": "ok"})
        store = RedisStatusStore(client=client).namespace("service")

        result = await store.get("abc")

        assert result == {"completed": True, "data": "ok"}
        client.get.assert_awaited_once_with("service:abc")

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, client: MagicMock) -> None:
        """Test an absent key reads as None."""
        store = RedisStatusStore(client=client)

        assert await store.get("abc") is None

    @pytest.mark.asyncio
    async def test_corrupt_value_raises(self, client: MagicMock) -> None:
        """Test undecodable values raise StatusStoreError."""
        client.get.return_value = "{not json"
        store = RedisStatusStore(client=client)

        with pytest.raises(StatusStoreError, match="Corrupt status record"):
            _ = await store.get("abc")

    @pytest.mark.asyncio
    async def test_connection_errors_are_wrapped(self, client: MagicMock) -> None:
        """Test Redis failures surface as StatusStoreError with the key."""
        client.set.side_effect = RedisConnectionError("refused")
        client.get.side_effect = RedisConnectionError("refused")
        client.delete.side_effect = RedisConnectionError("refused")
        store = RedisStatusStore(client=client)

        with pytest.raises(StatusStoreError) as set_error:
            await store.set("abc", {"completed": True})
        with pytest.raises(StatusStoreError):
            _ = await store.get("abc")
        with pytest.raises(StatusStoreError):
            await store.delete("abc")

        assert set_error.value.key == "abc"
        assert isinstance(set_error.value.__cause__, RedisConnectionError)

    @pytest.mark.asyncio
    async def test_delete_and_close(self, client: MagicMock) -> None:
        """Test delete targets the namespaced key and close releases the client."""
        store = RedisStatusStore(client=client).namespace("service")

        await store.delete("abc")
        await store.close()

        client.delete.assert_awaited_once_with("service:abc")
        client.aclose.assert_awaited_once()


class TestCreateStatusStore:
    """Test store construction from configuration."""

    def test_memory_backend(self) -> None:
        """Test the memory backend is the default."""
        store = create_status_store(StoreConfig())

        assert isinstance(store, MemoryStatusStore)
        assert store.namespace_key == "service"

    def test_redis_backend(self) -> None:
        """Test the Redis backend honors the namespace and expiration."""
        store = create_status_store(StoreConfig(backend="redis", namespace="jobs", expiration=10))

        assert isinstance(store, RedisStatusStore)
        assert store.namespace_key == "jobs"
        assert store.expiration == 10
