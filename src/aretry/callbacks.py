r"""Callback types and data structures for observability.

Callbacks let callers hook into the retry lifecycle for logging,
metrics, or alerting without changing the operation itself:

- on_retry: Called after a failed attempt, before the next wait
- on_success: Called when the operation succeeds
- on_failure: Called when the session ends in a terminal error

Example:
    ```pycon
    >>> from aretry.backoff import ConstantBackoff
    >>> from aretry.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Attempt {info.attempt}/{info.max_attempts} failed: {info.error}")
    ...
    >>> backoff = ConstantBackoff(constant=0.1)
    >>> backoff.retry(fetch, callbacks=CallbackConfig(on_retry=log_retry))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "CallbackConfig",
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.exceptions import RetryError


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The attempt that just failed (1-indexed).
        max_attempts: The attempt ceiling of the strategy.
        error: The exception raised by the operation.
    """

    attempt: int
    max_attempts: int
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        max_attempts: The attempt ceiling of the strategy.
        total_time: Total time spent in the session including waits
            (seconds).
    """

    attempt: int
    max_attempts: int
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The number of times the operation was invoked.
        max_attempts: The attempt ceiling of the strategy.
        error: The terminal error about to be raised.
        total_time: Total time spent in the session including waits
            (seconds).
    """

    attempt: int
    max_attempts: int
    error: RetryError
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_retry: Optional callback invoked after each failed attempt.
        on_success: Optional callback invoked when the operation succeeds.
        on_failure: Optional callback invoked on a terminal error.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None


def invoke_on_retry(
    callbacks: CallbackConfig | None, *, attempt: int, max_attempts: int, error: Exception
) -> None:
    """Invoke on_retry callback if provided."""
    if callbacks is not None and callbacks.on_retry is not None:
        callbacks.on_retry(RetryInfo(attempt=attempt, max_attempts=max_attempts, error=error))


def invoke_on_success(
    callbacks: CallbackConfig | None, *, attempt: int, max_attempts: int, start_time: float
) -> None:
    """Invoke on_success callback if provided.

    Args:
        callbacks: Optional callback configuration.
        attempt: The attempt that succeeded (1-indexed).
        max_attempts: The attempt ceiling of the strategy.
        start_time: The ``time.time()`` timestamp when the session started.
    """
    if callbacks is not None and callbacks.on_success is not None:
        callbacks.on_success(
            SuccessInfo(
                attempt=attempt,
                max_attempts=max_attempts,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_failure(
    callbacks: CallbackConfig | None,
    *,
    attempt: int,
    max_attempts: int,
    error: RetryError,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        callbacks: Optional callback configuration.
        attempt: The number of times the operation was invoked.
        max_attempts: The attempt ceiling of the strategy.
        error: The terminal error.
        start_time: The ``time.time()`` timestamp when the session started.
    """
    if callbacks is not None and callbacks.on_failure is not None:
        callbacks.on_failure(
            FailureInfo(
                attempt=attempt,
                max_attempts=max_attempts,
                error=error,
                total_time=time.time() - start_time,
            )
        )
