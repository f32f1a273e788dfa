r"""Utility functions for retry waits, jitter, and structured logging."""

from __future__ import annotations

__all__ = [
    "Jitter",
    "log_structured",
    "wait_for_interval",
    "wait_for_interval_async",
]

from aretry.utils.jitter import Jitter
from aretry.utils.sleep import wait_for_interval, wait_for_interval_async
from aretry.utils.structured_logging import log_structured
