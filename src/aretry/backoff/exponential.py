r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math
from dataclasses import replace
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.core.config import ExponentialBackoffConfig

if TYPE_CHECKING:
    from aretry.utils.jitter import Jitter


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates the wait before attempt ``k`` as
    ``initial_interval * scaling_factor ** k`` seconds. The wait of every
    attempt races the ``max_interval`` ceiling: when the ceiling fires
    first the session fails with ``IntervalExceededError``.

    Args:
        config: Optional options record. Keyword arguments override its
            fields.
        initial_interval: The base wait in seconds (default: 0.5).
        max_interval: The interval ceiling in seconds (default: 60.0).
        max_attempts: The attempt ceiling (default: 3).
        scaling_factor: The base of the power, must exceed 1
            (default: 2).
        jitter: The jitter source (default: ±1s).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial_interval=0.5)
        >>> backoff.calculate(1)
        1.0
        >>> backoff.calculate(2)
        2.0
        >>> backoff.calculate(3)
        4.0
        >>> # A scaling factor of 1 would never grow, so it is replaced
        >>> ExponentialBackoff(scaling_factor=1).scaling_factor
        2

        ```
    """

    def __init__(
        self,
        config: ExponentialBackoffConfig | None = None,
        *,
        initial_interval: float | None = None,
        max_interval: float | None = None,
        max_attempts: int | None = None,
        scaling_factor: float | None = None,
        jitter: Jitter | None = None,
    ) -> None:
        super().__init__(jitter)
        config = config if config is not None else ExponentialBackoffConfig()
        overrides = {
            name: value
            for name, value in (
                ("initial_interval", initial_interval),
                ("max_interval", max_interval),
                ("max_attempts", max_attempts),
                ("scaling_factor", scaling_factor),
            )
            if value is not None
        }
        self._defaults: ExponentialBackoffConfig = replace(config, **overrides).normalize()
        self.reset()

    @property
    def defaults(self) -> ExponentialBackoffConfig:
        """The normalized options restored by ``reset()``."""
        return self._defaults

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff wait.

        Args:
            attempt: The attempt number (1-indexed).

        Returns:
            The wait in seconds: ``initial_interval * scaling_factor ** attempt``,
            or ``math.inf`` once the power no longer fits in a float.
        """
        try:
            return self.initial_interval * self.scaling_factor**attempt
        except OverflowError:
            return math.inf

    def _restore_defaults(self) -> None:
        self.initial_interval = self._defaults.initial_interval
        self.max_interval = self._defaults.max_interval
        self.max_attempts = self._defaults.max_attempts
        self.scaling_factor = self._defaults.scaling_factor

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_interval={self.initial_interval}, "
            f"max_interval={self.max_interval}, max_attempts={self.max_attempts}, "
            f"scaling_factor={self.scaling_factor}, jitter={self.jitter!r})"
        )
