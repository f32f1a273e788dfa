r"""Abstract base class for backoff strategies and the shared retry
loop."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NoReturn

from aretry.callbacks import invoke_on_failure, invoke_on_retry, invoke_on_success
from aretry.exceptions import AttemptsExhaustedError, IntervalExceededError, RetryError
from aretry.utils.jitter import Jitter
from aretry.utils.sleep import wait_for_interval, wait_for_interval_async
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import CallbackConfig

logger: logging.Logger = logging.getLogger(__name__)


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before each attempt of
    an operation, and drives the operation through repeated attempts
    until it succeeds, the attempt ceiling is reached, or the wait of an
    attempt does not finish before the interval ceiling.

    A strategy captures its normalized tunables when it is built, and
    ``reset()`` restores them together with a zero attempt counter. The
    strategy resets itself at the end of every session, so one instance
    can serve many sequential sessions. It is not safe to share one
    instance between concurrent sessions: the attempt counter is
    mutated in place without locking.

    Args:
        jitter: The jitter source. Defaults to ``Jitter()`` (±1s).

    Attributes:
        current_attempt: The attempt in progress (1-indexed), 0 between
            sessions.
        max_attempts: The attempt ceiling.
        max_interval: The interval ceiling in seconds, or ``None`` if the
            variant does not race its waits against a ceiling.
        jitter: The jitter source.
    """

    max_attempts: int
    max_interval: float | None

    def __init__(self, jitter: Jitter | None = None) -> None:
        self.jitter = jitter if jitter is not None else Jitter()
        self.current_attempt = 0

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the pre-jitter wait before a given attempt.

        Args:
            attempt: The attempt number (1-indexed). For example,
                attempt=1 is the wait before the first invocation of the
                operation.

        Returns:
            The wait in seconds, before jitter.
        """

    @abstractmethod
    def _restore_defaults(self) -> None:
        r"""Set every tunable back to the normalized value captured at
        construction."""

    def compute_next_wait(self) -> float:
        """Compute the wait before the current attempt, jitter included.

        Returns:
            The wait in seconds, never negative.
        """
        return self.jitter.apply(self.calculate(self.current_attempt))

    def reset(self) -> None:
        """Reset the attempt counter and the tunables to the state right
        after construction."""
        self.current_attempt = 0
        self._restore_defaults()

    def retry(
        self,
        operation: Callable[[], Any],
        *,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        """Invoke ``operation`` until it succeeds or a limit is reached.

        Each iteration increments the attempt counter, fails if the attempt
        ceiling is exceeded, waits for the computed backoff, then invokes
        the operation. The operation fails by raising any ``Exception``;
        returning normally is a success and its return value is ignored.
        Capture results through a closure.

        The strategy is reset before this method returns or raises.

        Args:
            operation: The zero-argument callable to retry.
            callbacks: Optional lifecycle callbacks.

        Raises:
            AttemptsExhaustedError: If every allowed attempt failed.
            IntervalExceededError: If the interval ceiling fired before
                the wait of an attempt finished.
            TypeError: If ``operation`` is not callable.

        Example:
            ```pycon
            >>> from aretry.backoff import LinearBackoff
            >>> from aretry.utils.jitter import Jitter
            >>> calls = []
            >>> def flaky() -> None:
            ...     calls.append(len(calls) + 1)
            ...     if len(calls) < 2:
            ...         raise ConnectionError("not yet")
            ...
            >>> backoff = LinearBackoff(delta=2, jitter=Jitter(max_offset=0.0))
            >>> backoff.retry(flaky)  # doctest: +SKIP
            >>> calls  # doctest: +SKIP
            [1, 2]

            ```
        """
        self._check_operation(operation)
        start_time = time.time()
        try:
            while True:
                self._begin_attempt(callbacks, start_time)
                wait_time = self.compute_next_wait()
                if not wait_for_interval(wait_time, self.max_interval):
                    self._fail_interval(wait_time, callbacks, start_time)
                try:
                    operation()
                except Exception as exc:  # noqa: BLE001
                    self._record_failure(exc, callbacks)
                    continue
                self._record_success(callbacks, start_time)
                return
        finally:
            self.reset()

    async def retry_async(
        self,
        operation: Callable[[], Awaitable[Any]],
        *,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        """Asynchronous version of ``retry``.

        ``operation`` is awaited on every attempt and waits use
        ``asyncio.sleep``, so other tasks keep running in between.

        Args:
            operation: The zero-argument coroutine function to retry.
            callbacks: Optional lifecycle callbacks.

        Raises:
            AttemptsExhaustedError: If every allowed attempt failed.
            IntervalExceededError: If the interval ceiling fired before
                the wait of an attempt finished.
            TypeError: If ``operation`` is not callable.
        """
        self._check_operation(operation)
        start_time = time.time()
        try:
            while True:
                self._begin_attempt(callbacks, start_time)
                wait_time = self.compute_next_wait()
                if not await wait_for_interval_async(wait_time, self.max_interval):
                    self._fail_interval(wait_time, callbacks, start_time)
                try:
                    await operation()
                except Exception as exc:  # noqa: BLE001
                    self._record_failure(exc, callbacks)
                    continue
                self._record_success(callbacks, start_time)
                return
        finally:
            self.reset()

    @staticmethod
    def _check_operation(operation: Any) -> None:
        if not callable(operation):
            msg = f"operation must be callable, got {type(operation).__qualname__}"
            raise TypeError(msg)

    def _begin_attempt(self, callbacks: CallbackConfig | None, start_time: float) -> None:
        self.current_attempt += 1
        if self.current_attempt > self.max_attempts:
            self._fail(
                AttemptsExhaustedError(
                    attempts=self.current_attempt - 1, max_attempts=self.max_attempts
                ),
                callbacks,
                start_time,
            )

    def _fail_interval(
        self, wait_time: float, callbacks: CallbackConfig | None, start_time: float
    ) -> NoReturn:
        self._fail(
            IntervalExceededError(
                attempts=self.current_attempt - 1,
                max_attempts=self.max_attempts,
                wait_time=wait_time,
                max_interval=self.max_interval,
            ),
            callbacks,
            start_time,
        )

    def _fail(
        self, error: RetryError, callbacks: CallbackConfig | None, start_time: float
    ) -> NoReturn:
        self.reset()
        log_structured(
            logger,
            logging.WARNING,
            f"{self.__class__.__qualname__} gave up after {error.attempts} attempt(s): {error}",
            attempts=error.attempts,
            max_attempts=error.max_attempts,
        )
        invoke_on_failure(
            callbacks,
            attempt=error.attempts,
            max_attempts=error.max_attempts,
            error=error,
            start_time=start_time,
        )
        raise error

    def _record_failure(self, exc: Exception, callbacks: CallbackConfig | None) -> None:
        log_structured(
            logger,
            logging.INFO,
            f"Attempt {self.current_attempt}/{self.max_attempts} failed: {exc} "
            "..retrying after next interval",
            attempt=self.current_attempt,
            max_attempts=self.max_attempts,
            error=repr(exc),
        )
        invoke_on_retry(
            callbacks, attempt=self.current_attempt, max_attempts=self.max_attempts, error=exc
        )

    def _record_success(self, callbacks: CallbackConfig | None, start_time: float) -> None:
        logger.debug(
            f"Attempt {self.current_attempt}/{self.max_attempts} succeeded "
            f"after {time.time() - start_time:.2f}s"
        )
        invoke_on_success(
            callbacks,
            attempt=self.current_attempt,
            max_attempts=self.max_attempts,
            start_time=start_time,
        )
