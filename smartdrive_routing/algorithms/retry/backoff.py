"""
Bounded exponential backoff for transient external failures.

The delay schedule is a pure function; `retry_async` runs an operation
against it and reports what happened as a RetryResult instead of raising.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from ...exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RetryOutcome(Enum):
    SUCCEEDED = "succeeded"
    GAVE_UP = "gave_up"          # transient failures exhausted the attempts
    NOT_RETRYABLE = "not_retryable"


@dataclass(frozen=True)
class RetryResult(Generic[T]):
    attempts_made: int
    outcome: RetryOutcome
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is RetryOutcome.SUCCEEDED


def backoff_delay(attempt: int, base_delay_s: float = 1.0, factor: float = 2.0) -> float:
    """
    Delay to wait after the given failed attempt (1-based).

    With the defaults: attempt 1 -> 1s, attempt 2 -> 2s, attempt 3 -> 4s.
    """
    if attempt < 1:
        raise ValueError("attempt must be >= 1")
    return base_delay_s * factor ** (attempt - 1)


def is_transient(error: Exception) -> bool:
    return isinstance(error, ExternalServiceError) and error.transient


async def retry_async(operation: Callable[[], Awaitable[T]],
                      max_attempts: int = 3,
                      base_delay_s: float = 1.0,
                      factor: float = 2.0,
                      should_retry: Callable[[Exception], bool] = is_transient,
                      sleep: Callable[[float], Awaitable[None]] = asyncio.sleep) -> RetryResult[T]:
    """
    Run `operation` until it succeeds, fails permanently, or attempts run out.

    Only errors accepted by `should_retry` are retried. The sleep between
    attempts suspends the calling task only.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        max_attempts: Upper bound on calls to `operation`
        base_delay_s: Delay after the first failure
        factor: Multiplier applied per further failure
        should_retry: Classifier for retryable errors
        sleep: Awaitable sleep, injectable for tests

    Returns:
        RetryResult with the value on success, or the last error otherwise
    """
    last_error: Optional[Exception] = None

    for attempt in range(1, max_attempts + 1):
        try:
            value = await operation()
            return RetryResult(attempts_made=attempt, outcome=RetryOutcome.SUCCEEDED, value=value)
        except Exception as e:
            last_error = e
            if not should_retry(e):
                logger.warning(f"Non-retryable failure on attempt {attempt}: {e}")
                return RetryResult(attempts_made=attempt, outcome=RetryOutcome.NOT_RETRYABLE, error=e)

            if attempt < max_attempts:
                delay = backoff_delay(attempt, base_delay_s, factor)
                logger.info(f"Transient failure on attempt {attempt}/{max_attempts}: {e} - retrying in {delay:.1f}s")
                await sleep(delay)

    logger.warning(f"Giving up after {max_attempts} attempts: {last_error}")
    return RetryResult(attempts_made=max_attempts, outcome=RetryOutcome.GAVE_UP, error=last_error)
