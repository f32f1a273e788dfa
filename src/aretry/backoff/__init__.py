r"""Backoff strategies and their retry loop.

This package provides the constant, linear, and exponential backoff
strategies, and one factory function per strategy.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "new_constant_backoff",
    "new_exponential_backoff",
    "new_linear_backoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.factory import (
    new_constant_backoff,
    new_exponential_backoff,
    new_linear_backoff,
)
from aretry.backoff.linear import LinearBackoff
