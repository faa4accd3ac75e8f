"""Service registry mapping service names to notification handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notify_relay.core.exceptions import ServiceNotFoundError

if TYPE_CHECKING:
    from notify_relay.types.aliases import Handler

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Registry for named notification handlers.

    The last registration for a name wins. There is no namespacing or
    versioning.
    """

    def __init__(self) -> None:
        """Initialize an empty service registry."""
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Register a handler, replacing any previous one for ``name``.

        Args:
            name: Service name used by dispatch requests
            handler: Async callable taking the request payload
        """
        if name in self._handlers:
            logger.info("Replacing handler for service: %s", name)
        else:
            logger.info("Registered service: %s", name)
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        """Remove the handler registered for ``name``.

        Args:
            name: Service name to remove

        Raises:
            ServiceNotFoundError: If no handler is registered under ``name``
        """
        if name not in self._handlers:
            raise ServiceNotFoundError(name)
        del self._handlers[name]
        logger.info("Unregistered service: %s", name)

    def lookup(self, name: str) -> Handler:
        """Return the handler registered for ``name``.

        Args:
            name: Service name

        Returns:
            The registered handler

        Raises:
            ServiceNotFoundError: If no handler is registered under ``name``
        """
        try:
            return self._handlers[name]
        except KeyError:
            raise ServiceNotFoundError(name) from None

    def names(self) -> list[str]:
        """List registered service names in registration order."""
        return list(self._handlers.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
