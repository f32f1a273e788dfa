r"""Define the exceptions raised when a retry session ends in failure."""

from __future__ import annotations

__all__ = [
    "AttemptsExhaustedError",
    "IntervalExceededError",
    "RetryError",
    "RetryableStatusError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RetryError(Exception):
    """Base class for terminal retry outcomes.

    Operation errors are never wrapped in this exception. Callers that need
    the reason why the last attempt failed have to capture it themselves.

    Args:
        message: The error message.
        attempts: The number of times the operation was invoked.
        max_attempts: The attempt ceiling of the strategy.
    """

    def __init__(self, message: str, attempts: int, max_attempts: int) -> None:
        super().__init__(message)
        self.message = message
        self.attempts = attempts
        self.max_attempts = max_attempts


class AttemptsExhaustedError(RetryError):
    """Raised when every allowed attempt of the operation failed.

    Example:
        ```pycon
        >>> from aretry.exceptions import AttemptsExhaustedError
        >>> exc = AttemptsExhaustedError(attempts=3, max_attempts=3)
        >>> str(exc)
        'max retry attempts reached'
        >>> exc.attempts
        3

        ```
    """

    def __init__(self, attempts: int, max_attempts: int) -> None:
        super().__init__(
            "max retry attempts reached", attempts=attempts, max_attempts=max_attempts
        )


class IntervalExceededError(RetryError):
    """Raised when the interval ceiling fired before the wait completed.

    Args:
        attempts: The number of times the operation was invoked.
        max_attempts: The attempt ceiling of the strategy.
        wait_time: The wait (in seconds) that lost the race.
        max_interval: The interval ceiling (in seconds) that won it.
    """

    def __init__(
        self, attempts: int, max_attempts: int, wait_time: float, max_interval: float
    ) -> None:
        super().__init__(
            "max retry interval reached", attempts=attempts, max_attempts=max_attempts
        )
        self.wait_time = wait_time
        self.max_interval = max_interval


class RetryableStatusError(Exception):
    """Raised inside an HTTP attempt when the response status should be
    retried.

    Args:
        response: The response carrying the retryable status code.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        super().__init__(f"received retryable status {response.status_code}")
