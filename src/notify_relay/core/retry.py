"""Bounded fixed-delay retry for handler invocations."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from notify_relay.core.exceptions import (
    RetryExhaustedError,
    ServiceNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5
DEFAULT_RETRY_DELAY = 1.0


@dataclass(slots=True)
class RetryPolicy:
    """Retry a failing coroutine a fixed number of extra times.

    Attempts are numbered from 0. A failure on attempt ``k < max_retries``
    schedules attempt ``k + 1`` after ``delay`` seconds; a failure on attempt
    ``max_retries`` raises :class:`RetryExhaustedError` chained to the last
    error. Exceptions listed in ``non_retryable`` propagate on first sight.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    delay: float = DEFAULT_RETRY_DELAY
    non_retryable: tuple[type[BaseException], ...] = field(
        default=(ServiceNotFoundError,)
    )
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be a non-negative integer")
        if self.delay < 0:
            raise ValueError("delay must not be negative")

    @property
    def max_attempts(self) -> int:
        """Total handler invocations allowed, first attempt included."""
        return self.max_retries + 1

    async def run(
        self,
        func: Callable[[], Awaitable[object]],
        *,
        name: str = "handler",
    ) -> object:
        """Await ``func()`` until it succeeds or the budget is consumed.

        Args:
            func: Zero-argument coroutine factory, called once per attempt
            name: Label used in log messages and in the final error

        Returns:
            The first successful result

        Raises:
            RetryExhaustedError: When attempt ``max_retries`` fails
        """
        attempt = 0
        while True:
            try:
                logger.debug("Attempt %d/%d for %s", attempt + 1, self.max_attempts, name)
                return await func()
            except self.non_retryable as e:
                logger.warning("Non-retryable error for %s: %s", name, e)
                raise
            except Exception as e:
                if attempt >= self.max_retries:
                    logger.error("All %d attempts failed for %s: %s", self.max_attempts, name, e)
                    raise RetryExhaustedError(name, self.max_attempts) from e

                logger.info(
                    "Attempt %d failed for %s, retrying in %.2fs: %s",
                    attempt + 1, name, self.delay, e,
                )
                await self.sleep(self.delay)
                attempt += 1
