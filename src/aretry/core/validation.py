r"""Normalization utilities for backoff tunables.

Invalid tunables never raise. A missing, non-positive, NaN, or otherwise
out-of-range value is replaced by the compiled-in default of the
variant, and the replacement is logged at DEBUG level.
"""

from __future__ import annotations

__all__ = ["normalize_tunable"]

import logging
from typing import TypeVar

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


def normalize_tunable(
    value: T | None, default: T, *, name: str, minimum: float = 0, integer: bool = False
) -> T:
    """Return ``value`` if it is strictly greater than ``minimum``, else
    ``default``.

    Args:
        value: The caller-supplied value, or ``None`` if the caller did not
            set it.
        default: The compiled-in default used as replacement.
        name: The name of the tunable, used in the log message.
        minimum: The exclusive lower bound. Use ``1`` for tunables that
            must exceed one (e.g. scaling factors).
        integer: If ``True``, only ``int`` values are accepted (``bool``
            excluded), e.g. for attempt counts.

    Returns:
        The normalized value.

    Example:
        ```pycon
        >>> from aretry.core.validation import normalize_tunable
        >>> normalize_tunable(3, 10, name="max_attempts")
        3
        >>> normalize_tunable(-1, 10, name="max_attempts")
        10
        >>> normalize_tunable(None, 10, name="max_attempts")
        10
        >>> normalize_tunable(1, 2, name="scaling_factor", minimum=1)
        2
        >>> normalize_tunable(float("nan"), 0.5, name="initial_interval")
        0.5
        >>> normalize_tunable(2.5, 3, name="max_attempts", integer=True)
        3

        ```
    """
    if value is None:
        return default
    if integer and (isinstance(value, bool) or not isinstance(value, int)):
        logger.debug(f"{name}={value!r} must be an int, using default {name}={default}")
        return default
    if not value > minimum:
        logger.debug(f"{name}={value} must be > {minimum}, using default {name}={default}")
        return default
    return value
