r"""Wait helpers racing a backoff wait against an interval ceiling.

Both helpers resolve the race up front: the two timers start at the
same instant, so whichever is shorter fires first. Only the winning
timer is slept on and nothing is left running afterwards.
"""

from __future__ import annotations

__all__ = ["ceiling_fires_first", "wait_for_interval", "wait_for_interval_async"]

import asyncio
import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def ceiling_fires_first(wait_time: float, max_interval: float | None) -> bool:
    """Indicate if the interval ceiling wins the race against the wait.

    A tie goes to the ceiling.

    Args:
        wait_time: The wait in seconds.
        max_interval: The interval ceiling in seconds, or ``None`` if
            there is no ceiling.

    Returns:
        ``True`` if the ceiling fires first, otherwise ``False``.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import ceiling_fires_first
        >>> ceiling_fires_first(2.0, 60.0)
        False
        >>> ceiling_fires_first(61.0, 60.0)
        True
        >>> ceiling_fires_first(61.0, None)
        False

        ```
    """
    return max_interval is not None and wait_time >= max_interval


def wait_for_interval(wait_time: float, max_interval: float | None = None) -> bool:
    """Block until the wait or the interval ceiling elapses.

    Args:
        wait_time: The wait in seconds.
        max_interval: Optional interval ceiling in seconds.

    Returns:
        ``True`` if the full wait elapsed, ``False`` if the ceiling fired
        first.
    """
    if ceiling_fires_first(wait_time, max_interval):
        logger.debug(f"Wait of {wait_time:.2f}s exceeds the {max_interval:.2f}s ceiling")
        time.sleep(max_interval)
        return False
    logger.debug(f"Waiting {wait_time:.2f}s before next attempt")
    time.sleep(wait_time)
    return True


async def wait_for_interval_async(wait_time: float, max_interval: float | None = None) -> bool:
    """Asynchronous version of ``wait_for_interval``.

    Other tasks keep running during the wait.

    Args:
        wait_time: The wait in seconds.
        max_interval: Optional interval ceiling in seconds.

    Returns:
        ``True`` if the full wait elapsed, ``False`` if the ceiling fired
        first.
    """
    if ceiling_fires_first(wait_time, max_interval):
        logger.debug(f"Wait of {wait_time:.2f}s exceeds the {max_interval:.2f}s ceiling")
        await asyncio.sleep(max_interval)
        return False
    logger.debug(f"Waiting {wait_time:.2f}s before next attempt")
    await asyncio.sleep(wait_time)
    return True
