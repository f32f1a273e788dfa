r"""Unit tests for the asynchronous retry loop."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry.backoff import ConstantBackoff, ExponentialBackoff, LinearBackoff
from aretry.callbacks import CallbackConfig
from aretry.exceptions import AttemptsExhaustedError, IntervalExceededError

if TYPE_CHECKING:
    from aretry.utils.jitter import Jitter


@pytest.mark.asyncio
async def test_retry_async_success_first_attempt(mock_asleep: Mock, no_jitter: Jitter) -> None:
    backoff = ConstantBackoff(constant=0.1, jitter=no_jitter)
    operation = AsyncMock(return_value=None)

    await backoff.retry_async(operation)

    operation.assert_awaited_once_with()
    mock_asleep.assert_called_once_with(0.1)
    assert backoff.current_attempt == 0


@pytest.mark.asyncio
async def test_retry_async_succeeds_on_fifth_attempt(
    mock_asleep: Mock, no_jitter: Jitter
) -> None:
    """Test four failures followed by a success with 10 attempts allowed."""
    backoff = ExponentialBackoff(max_attempts=10, jitter=no_jitter)
    operation = AsyncMock(
        side_effect=[ValueError(), ValueError(), ValueError(), ValueError(), None]
    )

    await backoff.retry_async(operation)

    assert operation.await_count == 5
    assert mock_asleep.call_args_list == [
        call(1.0),
        call(2.0),
        call(4.0),
        call(8.0),
        call(16.0),
    ]


@pytest.mark.asyncio
async def test_retry_async_attempts_exhausted(mock_asleep: Mock, no_jitter: Jitter) -> None:
    backoff = LinearBackoff(max_attempts=3, delta=2, jitter=no_jitter)
    operation = AsyncMock(side_effect=ConnectionError("refused"))

    with pytest.raises(AttemptsExhaustedError) as exc_info:
        await backoff.retry_async(operation)

    assert operation.await_count == 3
    assert exc_info.value.attempts == 3
    assert mock_asleep.call_args_list == [call(2), call(4), call(6)]
    assert backoff.current_attempt == 0


@pytest.mark.asyncio
async def test_retry_async_interval_exceeded(mock_asleep: Mock, no_jitter: Jitter) -> None:
    backoff = ExponentialBackoff(initial_interval=5.0, max_interval=1.0, jitter=no_jitter)
    operation = AsyncMock()

    with pytest.raises(IntervalExceededError, match=r"max retry interval reached"):
        await backoff.retry_async(operation)

    operation.assert_not_awaited()
    mock_asleep.assert_called_once_with(1.0)
    assert backoff.current_attempt == 0


@pytest.mark.asyncio
async def test_retry_async_callbacks(mock_asleep: Mock, no_jitter: Jitter) -> None:
    on_retry, on_success = Mock(), Mock()
    backoff = ConstantBackoff(constant=0.1, jitter=no_jitter)

    await backoff.retry_async(
        AsyncMock(side_effect=[OSError(), None]),
        callbacks=CallbackConfig(on_retry=on_retry, on_success=on_success),
    )

    on_retry.assert_called_once()
    assert on_success.call_args.args[0].attempt == 2


@pytest.mark.asyncio
async def test_retry_async_operation_not_callable() -> None:
    with pytest.raises(TypeError, match=r"operation must be callable"):
        await ConstantBackoff().retry_async(None)  # type: ignore[arg-type]
