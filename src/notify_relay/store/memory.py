"""In-process status store."""

from __future__ import annotations

import json
import logging
from typing import Self, cast

from notify_relay.core.exceptions import StatusStoreError

logger = logging.getLogger(__name__)


class MemoryStatusStore:
    """Dictionary-backed status store for tests and single-process use.

    Values are serialized to JSON on write so callers never share mutable
    state with the store, matching what a networked store would do.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._data: dict[str, str] = {}
        self.namespace_key: str | None = None

    def namespace(self, prefix: str) -> Self:
        """Scope subsequent keys under ``prefix``."""
        self.namespace_key = prefix
        return self

    def _key(self, key: str) -> str:
        return f"{self.namespace_key}:{key}" if self.namespace_key else key

    async def get(self, key: str) -> dict[str, object] | None:
        raw = self._data.get(self._key(key))
        if raw is None:
            return None
        return cast(dict[str, object], json.loads(raw))

    async def set(self, key: str, value: dict[str, object]) -> None:
        try:
            self._data[self._key(key)] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StatusStoreError(f"Value for {key} is not JSON serializable: {e}", key) from e
        logger.debug("Stored status for %s", key)

    async def delete(self, key: str) -> None:
        _ = self._data.pop(self._key(key), None)

    async def close(self) -> None:
        self._data.clear()

    def keys(self) -> list[str]:
        """Stored keys, namespace included."""
        return list(self._data.keys())
