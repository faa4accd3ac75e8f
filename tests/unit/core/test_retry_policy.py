"""Tests for the fixed-delay retry policy."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from notify_relay.core.exceptions import (
    InvalidPayloadError,
    RetryExhaustedError,
    ServiceNotFoundError,
)
from notify_relay.core.retry import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, RetryPolicy


class FlakyHandler:
    """Handler failing a fixed number of times before succeeding."""

    def __init__(self, failures: int, result: object = "ok") -> None:
        self.failures: int = failures
        self.result: object = result
        self.calls: int = 0

    async def __call__(self) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f"failure {self.calls}")
        return self.result


class TestRetryPolicyDefaults:
    """Test default budget and validation."""

    def test_defaults(self) -> None:
        """Test the default budget is five retries one second apart."""
        policy = RetryPolicy()

        assert policy.max_retries == DEFAULT_MAX_RETRIES == 5
        assert policy.delay == DEFAULT_RETRY_DELAY == 1.0
        assert policy.max_attempts == 6

    @pytest.mark.parametrize(
        ("max_retries", "delay"),
        [(-1, 1.0), (3, -0.5)],
    )
    def test_rejects_negative_values(self, max_retries: int, delay: float) -> None:
        """Test negative budgets and delays are refused."""
        with pytest.raises(ValueError):
            _ = RetryPolicy(max_retries=max_retries, delay=delay)


class TestRetryPolicyRun:
    """Test retry loop behavior."""

    @pytest.mark.asyncio
    async def test_first_attempt_success_does_not_sleep(self) -> None:
        """Test a succeeding handler is called once with no delay."""
        sleep = AsyncMock()
        policy = RetryPolicy(max_retries=3, delay=1.0, sleep=sleep)
        handler = FlakyHandler(failures=0)

        result = await policy.run(handler, name="echo")

        assert result == "ok"
        assert handler.calls == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failures", [1, 2, 4])
    async def test_k_failures_then_success(self, failures: int) -> None:
        """Test k < max_retries failures lead to exactly k+1 invocations."""
        sleep = AsyncMock()
        policy = RetryPolicy(max_retries=5, delay=0.25, sleep=sleep)
        handler = FlakyHandler(failures=failures, result={"sent": True})

        result = await policy.run(handler, name="sms")

        assert result == {"sent": True}
        assert handler.calls == failures + 1
        assert sleep.await_count == failures
        sleep.assert_awaited_with(0.25)

    @pytest.mark.asyncio
    async def test_failure_on_last_attempt_succeeds(self) -> None:
        """Test a success on attempt max_retries still counts."""
        policy = RetryPolicy(max_retries=2, delay=0, sleep=AsyncMock())
        handler = FlakyHandler(failures=2)

        assert await policy.run(handler) == "ok"
        assert handler.calls == 3

    @pytest.mark.asyncio
    async def test_exhaustion_raises_chained_error(self) -> None:
        """Test max_retries+1 failures raise RetryExhaustedError from the last error."""
        sleep = AsyncMock()
        policy = RetryPolicy(max_retries=3, delay=1.0, sleep=sleep)
        handler = FlakyHandler(failures=100)

        with pytest.raises(RetryExhaustedError) as exc_info:
            _ = await policy.run(handler, name="email")

        assert handler.calls == 4
        assert sleep.await_count == 3
        assert exc_info.value.attempts == 4
        assert exc_info.value.service_name == "email"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert str(exc_info.value.__cause__) == "failure 4"

    @pytest.mark.asyncio
    async def test_zero_retries_means_single_attempt(self) -> None:
        """Test a zero budget gives up after the first failure."""
        policy = RetryPolicy(max_retries=0, delay=1.0, sleep=AsyncMock())
        handler = FlakyHandler(failures=1)

        with pytest.raises(RetryExhaustedError):
            _ = await policy.run(handler)

        assert handler.calls == 1

    @pytest.mark.asyncio
    async def test_unknown_service_propagates_immediately(self) -> None:
        """Test a missing registration is never retried."""
        sleep = AsyncMock()
        policy = RetryPolicy(max_retries=5, delay=1.0, sleep=sleep)
        func = AsyncMock(side_effect=ServiceNotFoundError("fax"))

        with pytest.raises(ServiceNotFoundError):
            _ = await policy.run(func)

        assert func.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_errors_use_whole_budget(self) -> None:
        """Test errors raised by handlers, invalid payloads included, are retried."""
        sleep = AsyncMock()
        policy = RetryPolicy(max_retries=2, delay=0.5, sleep=sleep)
        func = AsyncMock(side_effect=InvalidPayloadError("sms", ["to"]))

        with pytest.raises(RetryExhaustedError) as exc_info:
            _ = await policy.run(func, name="sms")

        assert func.await_count == 3
        assert sleep.await_count == 2
        assert isinstance(exc_info.value.__cause__, InvalidPayloadError)
