r"""Core configuration and validation for backoff strategies."""

from __future__ import annotations

__all__ = [
    "ConstantBackoffConfig",
    "ExponentialBackoffConfig",
    "LinearBackoffConfig",
    "normalize_tunable",
]

from aretry.core.config import (
    ConstantBackoffConfig,
    ExponentialBackoffConfig,
    LinearBackoffConfig,
)
from aretry.core.validation import normalize_tunable
