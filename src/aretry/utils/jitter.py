r"""Random jitter added to every computed wait.

Jitter spreads the retries of concurrent callers in time so that they
do not collide again on their next attempt.
"""

from __future__ import annotations

__all__ = ["Jitter"]

import logging
import random

from aretry.core.config import DEFAULT_JITTER

logger: logging.Logger = logging.getLogger(__name__)


class Jitter:
    """Uniform random offset in ``[-max_offset, +max_offset)`` seconds.

    Args:
        max_offset: The largest absolute offset in seconds
            (default: 1.0). Use 0 to disable jitter.
        rng: Optional random generator. Defaults to the shared
            generator of the ``random`` module.

    Example:
        ```pycon
        >>> from aretry.utils.jitter import Jitter
        >>> jitter = Jitter()
        >>> -1.0 <= jitter.sample() < 1.0
        True
        >>> Jitter(max_offset=0.0).apply(2.5)
        2.5
        >>> Jitter(max_offset=0.0).apply(-3.0)
        0.0

        ```
    """

    def __init__(self, max_offset: float = DEFAULT_JITTER, rng: random.Random | None = None) -> None:
        if max_offset < 0:
            msg = f"max_offset must be non-negative, got {max_offset}"
            raise ValueError(msg)
        self.max_offset = max_offset
        self._rng = rng

    def sample(self) -> float:
        """Draw one offset in seconds."""
        rng = self._rng if self._rng is not None else random
        return (rng.random() * 2.0 - 1.0) * self.max_offset  # noqa: S311

    def apply(self, wait: float) -> float:
        """Add one offset to ``wait``.

        Both the input and the result are floored at zero, so a wait never
        becomes negative.

        Args:
            wait: The pre-jitter wait in seconds.

        Returns:
            The jittered wait in seconds.
        """
        wait = max(wait, 0.0)
        offset = self.sample()
        total = max(wait + offset, 0.0)
        logger.debug(f"Jittered wait {total:.3f}s (base={wait:.3f}s, jitter={offset:+.3f}s)")
        return total

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_offset={self.max_offset})"
