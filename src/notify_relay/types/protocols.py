"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols for the collaborators
the dispatcher consumes without owning: the status store.
"""

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class StatusStore(Protocol):
    """Protocol for namespaced key-value persistence of status records.

    Values are JSON-compatible mappings. Implementations prefix every key
    with the active namespace, if any.
    """

    def namespace(self, prefix: str) -> Self:
        """Scope subsequent keys under ``prefix``.

        Args:
            prefix: Namespace prepended to keys as ``prefix:key``

        Returns:
            The store itself, for chaining
        """
        ...

    async def get(self, key: str) -> dict[str, object] | None:
        """Read the value stored under ``key``.

        Args:
            key: Key without namespace

        Returns:
            Stored mapping or None when absent
        """
        ...

    async def set(self, key: str, value: dict[str, object]) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Args:
            key: Key without namespace
            value: JSON-compatible mapping
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...

    async def close(self) -> None:
        """Release any underlying connection."""
        ...
