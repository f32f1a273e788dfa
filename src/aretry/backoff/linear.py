r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from dataclasses import replace
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.core.config import LinearBackoffConfig

if TYPE_CHECKING:
    from aretry.utils.jitter import Jitter


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates the wait before attempt ``k`` as
    ``(k - 1) * delta + delta``, i.e. ``delta * k`` seconds. The wait of
    every attempt races the ``max_interval`` ceiling: when the ceiling
    fires first the session fails with ``IntervalExceededError``.

    Args:
        config: Optional options record. Keyword arguments override its
            fields.
        max_interval: The interval ceiling in seconds (default: 60.0).
        max_attempts: The attempt ceiling (default: 3).
        delta: The growth step in seconds, must exceed 1 (default: 2).
        jitter: The jitter source (default: ±1s).

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(delta=2)
        >>> backoff.calculate(1)
        2
        >>> backoff.calculate(2)
        4
        >>> backoff.calculate(3)
        6

        ```
    """

    def __init__(
        self,
        config: LinearBackoffConfig | None = None,
        *,
        max_interval: float | None = None,
        max_attempts: int | None = None,
        delta: float | None = None,
        jitter: Jitter | None = None,
    ) -> None:
        super().__init__(jitter)
        config = config if config is not None else LinearBackoffConfig()
        overrides = {
            name: value
            for name, value in (
                ("max_interval", max_interval),
                ("max_attempts", max_attempts),
                ("delta", delta),
            )
            if value is not None
        }
        self._defaults: LinearBackoffConfig = replace(config, **overrides).normalize()
        self.reset()

    @property
    def defaults(self) -> LinearBackoffConfig:
        """The normalized options restored by ``reset()``."""
        return self._defaults

    def calculate(self, attempt: int) -> float:
        """Calculate linear backoff wait.

        Args:
            attempt: The attempt number (1-indexed).

        Returns:
            The wait in seconds: ``(attempt - 1) * delta + delta``,
            floored at zero.
        """
        return max((attempt - 1) * self.delta + self.delta, 0)

    def _restore_defaults(self) -> None:
        self.max_interval = self._defaults.max_interval
        self.max_attempts = self._defaults.max_attempts
        self.delta = self._defaults.delta

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_interval={self.max_interval}, "
            f"max_attempts={self.max_attempts}, delta={self.delta}, jitter={self.jitter!r})"
        )
