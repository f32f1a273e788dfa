r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from dataclasses import replace
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.core.config import ConstantBackoffConfig

if TYPE_CHECKING:
    from aretry.utils.jitter import Jitter


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Waits the same nominal delay (plus jitter) before every attempt, and
    never races the wait against an interval ceiling.

    Args:
        config: Optional options record. Keyword arguments override its
            fields.
        constant: The wait in seconds before every attempt (default: 5.0).
        max_attempts: The attempt ceiling (default: 10).
        jitter: The jitter source (default: ±1s).

    Zero or negative values are replaced by the defaults.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(constant=2.5)
        >>> backoff.calculate(1)
        2.5
        >>> backoff.calculate(10)
        2.5
        >>> ConstantBackoff(constant=-1).constant
        5.0

        ```
    """

    def __init__(
        self,
        config: ConstantBackoffConfig | None = None,
        *,
        constant: float | None = None,
        max_attempts: int | None = None,
        jitter: Jitter | None = None,
    ) -> None:
        super().__init__(jitter)
        config = config if config is not None else ConstantBackoffConfig()
        overrides = {
            name: value
            for name, value in (("constant", constant), ("max_attempts", max_attempts))
            if value is not None
        }
        self._defaults: ConstantBackoffConfig = replace(config, **overrides).normalize()
        self.max_interval = None
        self.reset()

    @property
    def defaults(self) -> ConstantBackoffConfig:
        """The normalized options restored by ``reset()``."""
        return self._defaults

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff wait.

        Args:
            attempt: The attempt number (1-indexed, unused).

        Returns:
            The constant wait in seconds.
        """
        return self.constant

    def _restore_defaults(self) -> None:
        self.constant = self._defaults.constant
        self.max_attempts = self._defaults.max_attempts

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(constant={self.constant}, "
            f"max_attempts={self.max_attempts}, jitter={self.jitter!r})"
        )
