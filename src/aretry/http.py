r"""Retry HTTP requests made with httpx through a backoff strategy.

An attempt fails when the request raises (typically an
``httpx.RequestError`` for timeouts, connection errors, and other
transport failures) or when the response status code is in
``status_forcelist``. Any other response ends the session and is
returned as-is, whatever its status.
"""

from __future__ import annotations

__all__ = ["request_with_retry", "request_with_retry_async"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.core.config import RETRY_STATUS_CODES
from aretry.exceptions import RetryableStatusError, RetryError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import CallbackConfig

logger: logging.Logger = logging.getLogger(__name__)


def _check_response(
    response: httpx.Response, status_forcelist: tuple[int, ...], url: str, method: str
) -> httpx.Response:
    if response.status_code in status_forcelist:
        logger.debug(f"{method} request to {url} returned retryable status {response.status_code}")
        raise RetryableStatusError(response)
    return response


def _log_attempt_error(exc: Exception, url: str, method: str) -> None:
    if isinstance(exc, httpx.TimeoutException):
        logger.debug(f"{method} request to {url} timed out: {exc}")
    elif isinstance(exc, httpx.RequestError):
        logger.debug(f"{method} request to {url} failed: {exc}")


def request_with_retry(
    backoff: BaseBackoffStrategy,
    request_func: Callable[..., httpx.Response],
    url: str,
    *,
    method: str = "GET",
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    callbacks: CallbackConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Perform an HTTP request, retrying transient failures with
    ``backoff``.

    Args:
        backoff: The strategy driving the retries.
        request_func: The function making the request (e.g.
            ``client.get``). It is called as ``request_func(url=url, **kwargs)``.
        url: The URL to send the request to.
        method: The HTTP method name, used for logging.
        status_forcelist: Status codes that make an attempt fail.
        callbacks: Optional lifecycle callbacks.
        **kwargs: Additional keyword arguments passed to ``request_func``.

    Returns:
        The first response whose status is not in ``status_forcelist``.

    Raises:
        RetryError: If the session ended in a terminal error. The last
            attempt's error, if any, is chained as ``__cause__``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.backoff import ExponentialBackoff
        >>> from aretry.http import request_with_retry
        >>> with httpx.Client() as client:
        ...     response = request_with_retry(
        ...         ExponentialBackoff(max_attempts=5),
        ...         client.get,
        ...         "https://api.example.com/data",
        ...     )  # doctest: +SKIP
        ...

        ```
    """
    response: httpx.Response | None = None
    last_error: Exception | None = None

    def attempt() -> None:
        nonlocal response, last_error
        try:
            response = _check_response(
                request_func(url=url, **kwargs), status_forcelist, url, method
            )
        except Exception as exc:
            _log_attempt_error(exc, url, method)
            last_error = exc
            raise

    try:
        backoff.retry(attempt, callbacks=callbacks)
    except RetryError as exc:
        raise exc from last_error
    return response


async def request_with_retry_async(
    backoff: BaseBackoffStrategy,
    request_func: Callable[..., Awaitable[httpx.Response]],
    url: str,
    *,
    method: str = "GET",
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    callbacks: CallbackConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Asynchronous version of ``request_with_retry``.

    Args:
        backoff: The strategy driving the retries.
        request_func: The coroutine function making the request (e.g.
            ``client.get`` of an ``httpx.AsyncClient``).
        url: The URL to send the request to.
        method: The HTTP method name, used for logging.
        status_forcelist: Status codes that make an attempt fail.
        callbacks: Optional lifecycle callbacks.
        **kwargs: Additional keyword arguments passed to ``request_func``.

    Returns:
        The first response whose status is not in ``status_forcelist``.

    Raises:
        RetryError: If the session ended in a terminal error. The last
            attempt's error, if any, is chained as ``__cause__``.
    """
    response: httpx.Response | None = None
    last_error: Exception | None = None

    async def attempt() -> None:
        nonlocal response, last_error
        try:
            response = _check_response(
                await request_func(url=url, **kwargs), status_forcelist, url, method
            )
        except Exception as exc:
            _log_attempt_error(exc, url, method)
            last_error = exc
            raise

    try:
        await backoff.retry_async(attempt, callbacks=callbacks)
    except RetryError as exc:
        raise exc from last_error
    return response
