r"""Factory functions building ready-to-use backoff strategies from
options records."""

from __future__ import annotations

__all__ = ["new_constant_backoff", "new_exponential_backoff", "new_linear_backoff"]

from typing import TYPE_CHECKING

from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.linear import LinearBackoff

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.core.config import (
        ConstantBackoffConfig,
        ExponentialBackoffConfig,
        LinearBackoffConfig,
    )
    from aretry.utils.jitter import Jitter


def new_constant_backoff(
    config: ConstantBackoffConfig | None = None, *, jitter: Jitter | None = None
) -> BaseBackoffStrategy:
    """Return a constant backoff strategy.

    Args:
        config: Optional options record. Unset or non-positive fields
            fall back to the defaults (5s wait, 10 attempts).
        jitter: Optional jitter source.

    Returns:
        The strategy.

    Example:
        ```pycon
        >>> from aretry.backoff import new_constant_backoff
        >>> from aretry.core import ConstantBackoffConfig
        >>> new_constant_backoff(ConstantBackoffConfig(max_attempts=-1)).max_attempts
        10

        ```
    """
    return ConstantBackoff(config, jitter=jitter)


def new_linear_backoff(
    config: LinearBackoffConfig | None = None, *, jitter: Jitter | None = None
) -> BaseBackoffStrategy:
    """Return a linear backoff strategy.

    Args:
        config: Optional options record. Unset or invalid fields fall
            back to the defaults (60s ceiling, 3 attempts, delta of 2).
        jitter: Optional jitter source.

    Returns:
        The strategy.
    """
    return LinearBackoff(config, jitter=jitter)


def new_exponential_backoff(
    config: ExponentialBackoffConfig | None = None, *, jitter: Jitter | None = None
) -> BaseBackoffStrategy:
    """Return an exponential backoff strategy.

    Args:
        config: Optional options record. Unset or invalid fields fall
            back to the defaults (0.5s initial interval, 60s ceiling,
            3 attempts, scaling factor of 2).
        jitter: Optional jitter source.

    Returns:
        The strategy.
    """
    return ExponentialBackoff(config, jitter=jitter)
