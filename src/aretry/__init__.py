r"""aretry - Retry-with-backoff primitives.

This package provides reusable strategies that repeatedly invoke an
operation until it succeeds, an attempt ceiling is reached, or the wait
of an attempt exceeds an interval ceiling. It is meant to be embedded in
API clients and other code talking to flaky services.

Key Features:
    - Three interchangeable strategies: Constant, Linear, and Exponential
    - ±1s jitter on every wait to spread concurrent retriers in time
    - Invalid tunables silently replaced by per-strategy defaults
    - Strategies reset themselves after every session and can be reused
    - Sync and async retry loops
    - Callback hooks and structured logging for observability
    - httpx helper retrying transport errors and retryable status codes

Example:
    ```pycon
    >>> from aretry import ExponentialBackoff
    >>> backoff = ExponentialBackoff(max_attempts=10)
    >>> result = {}
    >>> def fetch() -> None:
    ...     result["value"] = call_flaky_service()
    ...
    >>> backoff.retry(fetch)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptsExhaustedError",
    "BaseBackoffStrategy",
    "CallbackConfig",
    "ConstantBackoff",
    "ConstantBackoffConfig",
    "ExponentialBackoff",
    "ExponentialBackoffConfig",
    "IntervalExceededError",
    "Jitter",
    "LinearBackoff",
    "LinearBackoffConfig",
    "RetryError",
    "__version__",
    "new_constant_backoff",
    "new_exponential_backoff",
    "new_linear_backoff",
    "request_with_retry",
    "request_with_retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import (
    BaseBackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    new_constant_backoff,
    new_exponential_backoff,
    new_linear_backoff,
)
from aretry.callbacks import CallbackConfig
from aretry.core.config import (
    ConstantBackoffConfig,
    ExponentialBackoffConfig,
    LinearBackoffConfig,
)
from aretry.exceptions import AttemptsExhaustedError, IntervalExceededError, RetryError
from aretry.http import request_with_retry, request_with_retry_async
from aretry.utils.jitter import Jitter

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
