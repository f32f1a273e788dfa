r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math
from unittest.mock import Mock, call

import pytest

from aretry.backoff.exponential import ExponentialBackoff
from aretry.core.config import ExponentialBackoffConfig
from aretry.exceptions import AttemptsExhaustedError, IntervalExceededError
from aretry.utils.jitter import Jitter


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(initial_interval=0.5)
    assert backoff.calculate(1) == 1.0  # 0.5 * 2
    assert backoff.calculate(2) == 2.0  # 0.5 * 4
    assert backoff.calculate(3) == 4.0  # 0.5 * 8
    assert backoff.calculate(4) == 8.0  # 0.5 * 16


def test_exponential_backoff_custom_scaling_factor() -> None:
    """Test exponential backoff with a scaling factor of 3."""
    backoff = ExponentialBackoff(initial_interval=1.0, scaling_factor=3)
    assert backoff.calculate(1) == 3.0
    assert backoff.calculate(2) == 9.0
    assert backoff.calculate(3) == 27.0


@pytest.mark.parametrize("scaling_factor", [1.5, 2, 3])
def test_exponential_backoff_strictly_increasing(scaling_factor: float) -> None:
    """Test that waits grow with the attempt number."""
    backoff = ExponentialBackoff(scaling_factor=scaling_factor)
    waits = [backoff.calculate(attempt) for attempt in range(1, 10)]
    assert all(a < b for a, b in zip(waits, waits[1:]))


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.initial_interval == 0.5
    assert backoff.max_interval == 60.0
    assert backoff.max_attempts == 3
    assert backoff.scaling_factor == 2
    assert backoff.current_attempt == 0


@pytest.mark.parametrize("scaling_factor", [1, 0.5, 0, -2])
def test_exponential_backoff_invalid_scaling_factor(scaling_factor: float) -> None:
    """Test that a scaling factor not above 1 falls back to the default."""
    assert ExponentialBackoff(scaling_factor=scaling_factor).scaling_factor == 2


@pytest.mark.parametrize("initial_interval", [0, -0.5, float("nan")])
def test_exponential_backoff_invalid_initial_interval(initial_interval: float) -> None:
    """Test that a non-positive initial_interval falls back to the default."""
    assert ExponentialBackoff(initial_interval=initial_interval).initial_interval == 0.5


def test_exponential_backoff_calculate_overflow() -> None:
    """Test that a wait too large for a float becomes infinite."""
    assert ExponentialBackoff().calculate(1100) == math.inf
    assert ExponentialBackoff(scaling_factor=2.0).calculate(2000) == math.inf


def test_exponential_backoff_overflow_hits_interval_ceiling(
    mock_sleep: Mock, no_jitter: Jitter
) -> None:
    """Test that an overflowing wait loses the race to the interval ceiling."""
    backoff = ExponentialBackoff(
        initial_interval=1.0, max_interval=1e250, scaling_factor=1e200, jitter=no_jitter
    )
    operation = Mock(side_effect=OSError())

    with pytest.raises(IntervalExceededError):
        backoff.retry(operation)

    operation.assert_called_once()
    assert mock_sleep.call_args_list == [call(1e200), call(1e250)]


def test_exponential_backoff_from_config() -> None:
    """Test building from an options record."""
    config = ExponentialBackoffConfig(
        initial_interval=0.25, max_interval=30.0, max_attempts=6, scaling_factor=3
    )
    backoff = ExponentialBackoff(config)
    assert backoff.defaults == config
    assert backoff.calculate(2) == 2.25


def test_exponential_backoff_succeeds_on_fifth_attempt(
    mock_sleep: Mock, no_jitter: Jitter
) -> None:
    """Test four failures followed by a success with 10 attempts allowed."""
    backoff = ExponentialBackoff(max_attempts=10, jitter=no_jitter)
    calls = []

    def count() -> None:
        calls.append(len(calls) + 1)
        if len(calls) < 5:
            msg = f"number is not 5, number is {len(calls)}"
            raise ValueError(msg)

    backoff.retry(count)

    assert calls == [1, 2, 3, 4, 5]
    assert mock_sleep.call_args_list == [
        call(1.0),
        call(2.0),
        call(4.0),
        call(8.0),
        call(16.0),
    ]
    assert backoff.current_attempt == 0


def test_exponential_backoff_succeeds_with_jitter(mock_sleep: Mock) -> None:
    """Test that every jittered wait stays within ±1s of the formula."""
    backoff = ExponentialBackoff(max_attempts=10)
    operation = Mock(side_effect=[OSError(), OSError(), OSError(), OSError(), None])

    backoff.retry(operation)

    assert operation.call_count == 5
    for attempt, sleep_call in enumerate(mock_sleep.call_args_list, start=1):
        expected = 0.5 * 2**attempt
        assert expected - 1.0 <= sleep_call.args[0] <= expected + 1.0


def test_exponential_backoff_exhausts_default_attempts(
    mock_sleep: Mock, no_jitter: Jitter
) -> None:
    """Test that the default ceiling allows three attempts."""
    backoff = ExponentialBackoff(jitter=no_jitter)
    operation = Mock(side_effect=TimeoutError("slow"))

    with pytest.raises(AttemptsExhaustedError):
        backoff.retry(operation)

    assert operation.call_count == 3
    assert mock_sleep.call_args_list == [call(1.0), call(2.0), call(4.0)]


def test_exponential_backoff_interval_exceeded_first_attempt(
    mock_sleep: Mock, no_jitter: Jitter
) -> None:
    """Test that the operation is never invoked when the first wait is too
    long."""
    backoff = ExponentialBackoff(initial_interval=5.0, max_interval=1.0, jitter=no_jitter)
    operation = Mock()

    with pytest.raises(IntervalExceededError) as exc_info:
        backoff.retry(operation)

    operation.assert_not_called()
    mock_sleep.assert_called_once_with(1.0)
    assert exc_info.value.attempts == 0
    assert exc_info.value.wait_time == 10.0
    assert backoff.current_attempt == 0


def test_exponential_backoff_interval_exceeded_later_attempt(
    mock_sleep: Mock, no_jitter: Jitter
) -> None:
    """Test that growing waits eventually hit the ceiling."""
    backoff = ExponentialBackoff(max_interval=10.0, max_attempts=10, jitter=no_jitter)
    operation = Mock(side_effect=ConnectionError())

    with pytest.raises(IntervalExceededError):
        backoff.retry(operation)

    # 1s, 2s, 4s and 8s elapse, 16s loses to the 10s ceiling
    assert operation.call_count == 4
    assert mock_sleep.call_args_list == [call(1.0), call(2.0), call(4.0), call(8.0), call(10.0)]


def test_exponential_backoff_repr() -> None:
    """Test the representation."""
    assert repr(ExponentialBackoff(jitter=Jitter(0.0))) == (
        "ExponentialBackoff(initial_interval=0.5, max_interval=60.0, max_attempts=3, "
        "scaling_factor=2, jitter=Jitter(max_offset=0.0))"
    )
