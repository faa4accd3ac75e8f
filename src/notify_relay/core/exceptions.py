"""Error taxonomy for the dispatch engine."""

from __future__ import annotations

from typing import Any


class NotifyRelayError(Exception):
    """Base exception for all notify-relay errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportExplicitAny] # Flexible error context
        """Initialize NotifyRelayError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportExplicitAny] # Flexible error context


class ServiceNotFoundError(NotifyRelayError):
    """Raised when a job references a service with no registered handler.

    Never retried: retrying cannot fix a missing registration.
    """

    def __init__(self, service_name: str) -> None:
        """Initialize ServiceNotFoundError.

        Args:
            service_name: Name that was looked up
        """
        super().__init__(
            f"Service '{service_name}' is not registered",
            {"service": service_name},
        )
        self.service_name: str = service_name


class RetryExhaustedError(NotifyRelayError):
    """Raised once a handler has failed on every attempt of its budget."""

    def __init__(self, service_name: str, attempts: int) -> None:
        """Initialize RetryExhaustedError.

        Args:
            service_name: Service whose handler kept failing
            attempts: Total number of handler invocations made
        """
        super().__init__(
            f"Service '{service_name}' failed after {attempts} attempts",
            {"service": service_name, "attempts": attempts},
        )
        self.service_name: str = service_name
        self.attempts: int = attempts


class StatusStoreError(NotifyRelayError):
    """Raised when the status store cannot be read or written."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize StatusStoreError.

        Args:
            message: Error message
            key: Key being accessed when the failure happened
        """
        super().__init__(message, {"key": key} if key is not None else None)
        self.key: str | None = key


class InvalidPayloadError(NotifyRelayError):
    """Raised by a handler when a payload lacks required fields."""

    def __init__(self, service_name: str, missing: list[str]) -> None:
        """Initialize InvalidPayloadError.

        Args:
            service_name: Handler that rejected the payload
            missing: Names of the missing fields
        """
        super().__init__(
            f"Payload for '{service_name}' is missing: {', '.join(missing)}",
            {"service": service_name, "missing": missing},
        )
        self.service_name: str = service_name
        self.missing: list[str] = missing
