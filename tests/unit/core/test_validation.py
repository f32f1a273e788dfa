r"""Unit tests for tunable normalization."""

from __future__ import annotations

import logging

import pytest

from aretry.core.validation import normalize_tunable


@pytest.mark.parametrize("value", [1, 3, 100])
def test_normalize_tunable_keeps_positive_value(value: int) -> None:
    """Test that strictly positive values are kept."""
    assert normalize_tunable(value, 10, name="max_attempts") == value


@pytest.mark.parametrize("value", [0, -1, -100])
def test_normalize_tunable_replaces_non_positive_value(value: int) -> None:
    """Test that zero and negative values are replaced by the default."""
    assert normalize_tunable(value, 10, name="max_attempts") == 10


def test_normalize_tunable_replaces_none() -> None:
    """Test that an unset value is replaced by the default."""
    assert normalize_tunable(None, 0.5, name="initial_interval") == 0.5


@pytest.mark.parametrize(("value", "expected"), [(0.5, 2), (1, 2), (1.5, 1.5), (3, 3)])
def test_normalize_tunable_with_minimum(value: float, expected: float) -> None:
    """Test that values not above the minimum are replaced."""
    assert normalize_tunable(value, 2, name="scaling_factor", minimum=1) == expected


def test_normalize_tunable_logs_replacement(caplog: pytest.LogCaptureFixture) -> None:
    """Test that replacing a caller-supplied value is logged."""
    with caplog.at_level(logging.DEBUG, logger="aretry.core.validation"):
        normalize_tunable(-1, 3, name="max_attempts")
    assert "max_attempts=-1" in caplog.text
    assert "using default max_attempts=3" in caplog.text


def test_normalize_tunable_does_not_log_unset_value(caplog: pytest.LogCaptureFixture) -> None:
    """Test that falling back for an unset value is silent."""
    with caplog.at_level(logging.DEBUG, logger="aretry.core.validation"):
        normalize_tunable(None, 3, name="max_attempts")
    assert caplog.text == ""


def test_normalize_tunable_replaces_nan() -> None:
    """Test that NaN is replaced by the default."""
    assert normalize_tunable(float("nan"), 0.5, name="initial_interval") == 0.5


@pytest.mark.parametrize("value", [True, 2.5, 3.0])
def test_normalize_tunable_integer_rejects_non_int(value: float) -> None:
    """Test that integer tunables only accept int values."""
    assert normalize_tunable(value, 3, name="max_attempts", integer=True) == 3


def test_normalize_tunable_integer_keeps_int() -> None:
    assert normalize_tunable(7, 3, name="max_attempts", integer=True) == 7
