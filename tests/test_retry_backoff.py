"""
Tests for the backoff schedule and retry loop.
"""

import asyncio

import pytest

from smartdrive_routing.algorithms.retry import (
    RetryOutcome,
    backoff_delay,
    is_transient,
    retry_async
)
from smartdrive_routing.exceptions import ExternalServiceError


class FakeSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


class FlakyOperation:
    """Fails with the given errors in order, then returns 'ok'."""

    def __init__(self, errors):
        self.errors = list(errors)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return "ok"


def test_backoff_schedule():
    assert [backoff_delay(n) for n in (1, 2, 3)] == [1.0, 2.0, 4.0]
    assert backoff_delay(2, base_delay_s=0.5, factor=3.0) == 1.5


def test_backoff_rejects_attempt_zero():
    with pytest.raises(ValueError):
        backoff_delay(0)


def test_status_classification():
    assert is_transient(ExternalServiceError.from_status("overpass", 429))
    assert is_transient(ExternalServiceError.from_status("overpass", 503))
    assert not is_transient(ExternalServiceError.from_status("overpass", 400))
    assert not is_transient(ValueError("boom"))


def test_rate_limit_then_success():
    sleep = FakeSleep()
    operation = FlakyOperation([ExternalServiceError.from_status("overpass", 429)])

    result = asyncio.run(retry_async(operation, sleep=sleep))

    assert result.succeeded
    assert result.value == "ok"
    assert result.attempts_made == 2
    assert sleep.delays == [1.0]


def test_permanent_failure_is_not_retried():
    sleep = FakeSleep()
    operation = FlakyOperation([ExternalServiceError.from_status("overpass", 404)])

    result = asyncio.run(retry_async(operation, sleep=sleep))

    assert result.outcome is RetryOutcome.NOT_RETRYABLE
    assert result.attempts_made == 1
    assert operation.calls == 1
    assert sleep.delays == []


def test_gives_up_after_max_attempts():
    sleep = FakeSleep()
    errors = [ExternalServiceError.from_status("overpass", 502) for _ in range(5)]
    operation = FlakyOperation(errors)

    result = asyncio.run(retry_async(operation, max_attempts=3, sleep=sleep))

    assert result.outcome is RetryOutcome.GAVE_UP
    assert result.attempts_made == 3
    assert operation.calls == 3
    assert sleep.delays == [1.0, 2.0]
    assert isinstance(result.error, ExternalServiceError)
