r"""Configuration records and defaults for backoff strategies.

This module provides the compiled-in defaults of each backoff variant
and one plain options record per variant. Records may leave any field
unset; ``normalize()`` fills unset or invalid fields with the defaults.
"""

from __future__ import annotations

__all__ = [
    "ConstantBackoffConfig",
    "DEFAULT_CONSTANT",
    "DEFAULT_CONSTANT_MAX_ATTEMPTS",
    "DEFAULT_DELTA",
    "DEFAULT_INITIAL_INTERVAL",
    "DEFAULT_JITTER",
    "DEFAULT_LINEAR_MAX_ATTEMPTS",
    "DEFAULT_LINEAR_MAX_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_INTERVAL",
    "DEFAULT_SCALING_FACTOR",
    "ExponentialBackoffConfig",
    "LinearBackoffConfig",
    "RETRY_STATUS_CODES",
]

from dataclasses import dataclass

from aretry.core.validation import normalize_tunable

# Constant backoff: every attempt waits 5s (plus jitter), 10 attempts max
DEFAULT_CONSTANT = 5.0
DEFAULT_CONSTANT_MAX_ATTEMPTS = 10

# Linear backoff: attempt k waits delta * k seconds, 3 attempts max
# With delta=2: 1st attempt waits 2s, 2nd waits 4s, 3rd waits 6s
DEFAULT_LINEAR_MAX_INTERVAL = 60.0
DEFAULT_LINEAR_MAX_ATTEMPTS = 3
DEFAULT_DELTA = 2

# Exponential backoff: attempt k waits initial_interval * scaling_factor ** k
# With 0.5 and 2: 1st attempt waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_INITIAL_INTERVAL = 0.5
DEFAULT_MAX_INTERVAL = 60.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_SCALING_FACTOR = 2

# Maximum jitter offset in seconds, sampled from [-1.0, 1.0)
DEFAULT_JITTER = 1.0

# HTTP status codes that make an attempt of request_with_retry fail
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class ConstantBackoffConfig:
    """Options for ``ConstantBackoff``.

    Args:
        constant: The wait in seconds before every attempt.
        max_attempts: The number of attempts allowed before failing.

    Example:
        ```pycon
        >>> from aretry.core.config import ConstantBackoffConfig
        >>> ConstantBackoffConfig(constant=0).normalize()
        ConstantBackoffConfig(constant=5.0, max_attempts=10)

        ```
    """

    constant: float | None = None
    max_attempts: int | None = None

    def normalize(self) -> ConstantBackoffConfig:
        """Return a copy where every unset or non-positive field is
        replaced by its default."""
        return ConstantBackoffConfig(
            constant=normalize_tunable(self.constant, DEFAULT_CONSTANT, name="constant"),
            max_attempts=normalize_tunable(
                self.max_attempts, DEFAULT_CONSTANT_MAX_ATTEMPTS, name="max_attempts", integer=True
            ),
        )


@dataclass(frozen=True)
class LinearBackoffConfig:
    """Options for ``LinearBackoff``.

    Args:
        max_interval: The interval ceiling in seconds. An attempt whose
            wait does not finish before this ceiling ends the session.
        max_attempts: The number of attempts allowed before failing.
        delta: The linear growth step in seconds. Must exceed 1.

    Example:
        ```pycon
        >>> from aretry.core.config import LinearBackoffConfig
        >>> LinearBackoffConfig(delta=1, max_attempts=5).normalize()
        LinearBackoffConfig(max_interval=60.0, max_attempts=5, delta=2)

        ```
    """

    max_interval: float | None = None
    max_attempts: int | None = None
    delta: float | None = None

    def normalize(self) -> LinearBackoffConfig:
        """Return a copy where every unset or invalid field is replaced by
        its default."""
        return LinearBackoffConfig(
            max_interval=normalize_tunable(
                self.max_interval, DEFAULT_LINEAR_MAX_INTERVAL, name="max_interval"
            ),
            max_attempts=normalize_tunable(
                self.max_attempts, DEFAULT_LINEAR_MAX_ATTEMPTS, name="max_attempts", integer=True
            ),
            delta=normalize_tunable(self.delta, DEFAULT_DELTA, name="delta", minimum=1),
        )


@dataclass(frozen=True)
class ExponentialBackoffConfig:
    """Options for ``ExponentialBackoff``.

    Args:
        initial_interval: The base wait in seconds.
        max_interval: The interval ceiling in seconds.
        max_attempts: The number of attempts allowed before failing.
        scaling_factor: The base of the power. Must exceed 1.
    """

    initial_interval: float | None = None
    max_interval: float | None = None
    max_attempts: int | None = None
    scaling_factor: float | None = None

    def normalize(self) -> ExponentialBackoffConfig:
        """Return a copy where every unset or invalid field is replaced by
        its default."""
        return ExponentialBackoffConfig(
            initial_interval=normalize_tunable(
                self.initial_interval, DEFAULT_INITIAL_INTERVAL, name="initial_interval"
            ),
            max_interval=normalize_tunable(
                self.max_interval, DEFAULT_MAX_INTERVAL, name="max_interval"
            ),
            max_attempts=normalize_tunable(
                self.max_attempts, DEFAULT_MAX_ATTEMPTS, name="max_attempts", integer=True
            ),
            scaling_factor=normalize_tunable(
                self.scaling_factor, DEFAULT_SCALING_FACTOR, name="scaling_factor", minimum=1
            ),
        )
